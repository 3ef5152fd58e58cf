"""Bulk draw helpers that pull sequences out of a generator as NumPy arrays.

Draws happen one at a time in call order, so the arrays hold exactly the
values that repeated single calls would have produced.
"""

import numpy as np

from squarewalk.prng.generator import MiddleSquareGenerator


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")


def draw_uniform(gen: MiddleSquareGenerator, count: int) -> np.ndarray:
    """Draw ``count`` uniform variates as a float64 array of shape (count,)."""
    _check_count(count)
    return np.fromiter(
        (gen.next_uniform() for _ in range(count)), dtype=np.float64, count=count
    )


def draw_gaussian(gen: MiddleSquareGenerator, count: int) -> np.ndarray:
    """Draw ``count`` Gaussian pairs as a float64 array of shape (count, 2)."""
    _check_count(count)
    out = np.empty((count, 2), dtype=np.float64)
    for i in range(count):
        out[i] = gen.next_gaussian_pair()
    return out


def draw_binary(gen: MiddleSquareGenerator, count: int) -> np.ndarray:
    """Draw ``count`` binary variates as an int8 array of 0s and 1s."""
    _check_count(count)
    return np.fromiter(
        (gen.next_binary() for _ in range(count)), dtype=np.int8, count=count
    )
