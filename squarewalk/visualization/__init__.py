"""Static figures for walk runs: trajectory plot and PRNG comparison chart."""

from squarewalk.visualization.render import render_all
from squarewalk.visualization.style import apply_style, save_figure

__all__ = [
    "render_all",
    "apply_style",
    "save_figure",
]
