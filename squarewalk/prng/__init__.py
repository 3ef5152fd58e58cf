"""Pseudo-random generation: middle-square generator and bulk draw helpers."""

from squarewalk.prng.draws import draw_binary, draw_gaussian, draw_uniform
from squarewalk.prng.generator import MiddleSquareGenerator

__all__ = [
    "MiddleSquareGenerator",
    "draw_uniform",
    "draw_gaussian",
    "draw_binary",
]
