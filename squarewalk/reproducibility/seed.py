"""Seed management for walks and for the library generators they are compared with.

The walk itself only ever reads its own MiddleSquareGenerator. The
comparison report also draws from NumPy, so a run that wants every
number reproducible seeds both from one master seed.
"""

import random
import time

import numpy as np

from squarewalk.prng.generator import MASK64, MiddleSquareGenerator


def default_seed() -> int:
    """Seed used when none is given: the current Unix time in seconds."""
    return int(time.time()) & MASK64


def set_seed(seed: int) -> None:
    """Seed the library RNGs used alongside the middle-square generator.

    Seeds are set in this order:

    1. Python random module
    2. NumPy legacy global RNG (accepts 32-bit seeds only, so reduced)

    Args:
        seed: Master seed value (e.g., 19890929).
    """
    random.seed(seed)
    np.random.seed(seed % 2**32)


def library_rng(seed: int) -> np.random.Generator:
    """NumPy Generator (PCG64) to compare the middle-square generator against."""
    return np.random.default_rng(seed & MASK64)


def verify_seed_determinism(seed: int, n: int = 10) -> bool:
    """Verify that re-seeding reproduces identical sequences.

    Draws ``n`` values from a MiddleSquareGenerator and from the library
    generator, re-seeds, draws again, and compares. This is the self-test
    that proves seed control works.

    Args:
        seed: Seed value to test.
        n: Number of values to draw from each source.

    Returns:
        True if both sources produce identical sequences after re-seeding.
    """
    gen = MiddleSquareGenerator(seed)
    m1 = [gen.next_uniform() for _ in range(n)]
    l1 = library_rng(seed).random(n).tolist()

    gen = MiddleSquareGenerator(seed)
    m2 = [gen.next_uniform() for _ in range(n)]
    l2 = library_rng(seed).random(n).tolist()

    return m1 == m2 and l1 == l2
