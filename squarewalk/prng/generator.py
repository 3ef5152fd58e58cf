"""Middle-square style pseudo-random generator.

One 64-bit state word is squared (wrapping modulo 2**64), its 32-bit
halves are swapped, and a 10-digit decimal window of the result becomes
the uniform variate. Gaussian pairs (Box-Muller) and binary draws are
built from uniform draws only and carry no extra state.

This is a toy generator: reproducible for a fixed seed, not
cryptographically or statistically rigorous.
"""

import logging
import math

log = logging.getLogger(__name__)

MASK64 = (1 << 64) - 1
HALF_WIDTH = 32

# Decimal window: keep 15 low digits, drop the lowest 5, scale the rest.
WINDOW_MODULUS = 10**15
DISCARD_DIVISOR = 10**5
SCALE = 10_000_000_000.0


class MiddleSquareGenerator:
    """Seedable uniform, Gaussian and binary variate source.

    Every draw mutates the shared state, so one instance must have a
    single owner (a caller or one RandomWalk).

    Args:
        seed: Initial state. Reduced modulo 2**64, so negative or
            oversized Python ints behave like an unsigned conversion.
            0 is accepted but degenerates to a constant-zero stream.
    """

    __slots__ = ("_seed", "_state")

    def __init__(self, seed: int) -> None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        self._seed = seed & MASK64
        self._state = self._seed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    def next_uniform(self) -> float:
        """Advance the state and return a uniform variate in [0, 1)."""
        squared = (self._state * self._state) & MASK64
        self._state = ((squared >> HALF_WIDTH) | (squared << HALF_WIDTH)) & MASK64
        return ((self._state % WINDOW_MODULUS) // DISCARD_DIVISOR) / SCALE

    def next_gaussian_pair(self) -> tuple[float, float]:
        """Return two standard-normal variates via the Box-Muller transform.

        Consumes exactly two uniform draws, ``x1`` then ``x2``. If ``x1``
        is exactly 0 the radius is infinite and the pair is non-finite
        (inf, or NaN where the trig factor is 0). That case is logged and
        passed through unchanged.
        """
        x1 = self.next_uniform()
        x2 = self.next_uniform()
        if x1 > 0.0:
            radius = math.sqrt(-2.0 * math.log(x1))
        else:
            log.warning(
                "Uniform draw of 0.0 in Box-Muller (state=%d); "
                "Gaussian pair is non-finite",
                self._state,
            )
            radius = math.inf
        angle = 2.0 * math.pi * x2
        return radius * math.cos(angle), radius * math.sin(angle)

    def next_binary(self) -> int:
        """Return 1 if the next uniform draw is >= 0.5, else 0."""
        return 1 if self.next_uniform() >= 0.5 else 0

    def __repr__(self) -> str:
        return f"MiddleSquareGenerator(seed={self._seed}, state={self._state})"
