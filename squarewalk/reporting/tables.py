"""Plain-text tables of raw draws and trajectories.

Each function builds the whole table as a string so callers decide
whether to print it, log it, or write it somewhere.
"""

import numpy as np

from squarewalk.prng.draws import draw_binary, draw_gaussian, draw_uniform
from squarewalk.prng.generator import MiddleSquareGenerator
from squarewalk.walk.types import Trajectory


def uniform_table(gen: MiddleSquareGenerator, count: int) -> str:
    """One uniform draw per row under an ``x`` header."""
    values = draw_uniform(gen, count)
    lines = ["Uniform-distributed Random Numbers", "x"]
    lines.extend(f"{v:.10f}" for v in values)
    return "\n".join(lines)


def gaussian_table(gen: MiddleSquareGenerator, count: int) -> str:
    """Gaussian draws two per row (``y1``, ``y2``); ``count // 2`` rows."""
    pairs = draw_gaussian(gen, count // 2)
    lines = ["Gaussian-distributed Random Numbers", f"{'y1':>12}\t{'y2':>12}"]
    lines.extend(f"{y1:>12.6f}\t{y2:>12.6f}" for y1, y2 in pairs)
    return "\n".join(lines)


def binary_table(gen: MiddleSquareGenerator, count: int) -> str:
    """Binary draws placed in a ``Bin0`` or ``Bin1`` column."""
    bits = draw_binary(gen, count)
    lines = ["Binary-distributed Random Numbers", "Bin0\tBin1"]
    lines.extend("\t1" if bit else "0\t" for bit in bits)
    return "\n".join(lines)


def trajectory_table(trajectory: Trajectory, precision: int = 3) -> str:
    """Tab-separated ``x``/``y`` rows, fixed-point at ``precision`` digits."""
    lines = ["x\ty"]
    lines.extend(
        f"{x:.{precision}f}\t{y:.{precision}f}" for x, y in trajectory.points
    )
    return "\n".join(lines)


def decile_counts(values: np.ndarray) -> np.ndarray:
    """Count values in [0, 1) falling into each tenth: bins .0 through .9."""
    idx = np.floor(np.asarray(values, dtype=np.float64) * 10).astype(np.int64)
    return np.bincount(np.clip(idx, 0, 9), minlength=10)
