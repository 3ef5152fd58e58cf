"""Bounded 2-D random walk driven by a MiddleSquareGenerator.

A walk starts at a point inside a centred rectangle and moves one axis at
a time. Each step draws a distance (uniform, or a Gaussian component with
|g| <= 1), an axis and a sign; candidates that leave the rectangle are
discarded and all three are redrawn. The walk stops after the requested
number of accepted steps, or earlier once an accepted point lands within
DESTINATION_TOLERANCE of the destination on both axes.

All rejection loops are unbounded unless ``max_attempts`` is given, in
which case exceeding it raises RejectionLimitError.
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

from squarewalk.prng.generator import MiddleSquareGenerator
from squarewalk.reproducibility.seed import default_seed
from squarewalk.walk.types import (
    Bounds,
    RejectionLimitError,
    Trajectory,
    WalkMode,
    WalkStatus,
)

if TYPE_CHECKING:
    from squarewalk.config.experiment import WalkConfig

log = logging.getLogger(__name__)

DESTINATION_TOLERANCE = 1e-5
DEFAULT_WIDTH = 4.0
DEFAULT_HEIGHT = 4.0
DEFAULT_STEPS = 100


def _coerce_mode(mode: WalkMode | str) -> WalkMode:
    """Resolve a mode value; anything outside the two members is fatal."""
    if isinstance(mode, WalkMode):
        return mode
    try:
        return WalkMode(mode)
    except ValueError:
        raise ValueError(
            f"Invalid walk mode {mode!r}; expected one of "
            f"{[m.value for m in WalkMode]}"
        ) from None


class RandomWalk:
    """Stateful random-walk simulator owning its generator.

    The start point is rejection-sampled at construction unless supplied.
    Geometry can be changed afterwards through the setters; none of them
    re-validate that the start lies inside the rectangle.

    Args:
        mode: WalkMode (or its string value) for start and step draws.
        seed: Seed for a fresh generator. Defaults to the current Unix
            time when neither seed nor generator is given.
        width: Rectangle width, centred on the origin.
        height: Rectangle height, centred on the origin.
        destination: Point whose proximity ends the walk early.
        start: Explicit start point; skips start sampling (no draws).
        generator: Existing generator to take ownership of, instead of seed.
        max_attempts: Optional cap on any single rejection loop.
    """

    def __init__(
        self,
        mode: WalkMode | str,
        seed: int | None = None,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        destination: tuple[float, float] = (0.0, 0.0),
        start: tuple[float, float] | None = None,
        generator: MiddleSquareGenerator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        self._mode = _coerce_mode(mode)

        if generator is not None and seed is not None:
            raise ValueError("Pass either seed or generator, not both")
        if generator is None:
            if seed is None:
                seed = default_seed()
            generator = MiddleSquareGenerator(seed)
        self._rng = generator

        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._max_attempts = max_attempts

        self._width = float(width)
        self._height = float(height)
        self._bounds = Bounds.centered(self._width, self._height)
        self._destination = (float(destination[0]), float(destination[1]))

        if start is None:
            self._start = self.pick_start()
        else:
            self._start = (float(start[0]), float(start[1]))

        log.debug(
            "RandomWalk mode=%s seed=%d bounds=%s start=%s destination=%s",
            self._mode.value,
            self._rng.seed,
            self._bounds,
            self._start,
            self._destination,
        )

    # ── Rejection-loop bookkeeping ───────────────────────────────────

    def _check_attempts(self, attempts: int, loop: str) -> None:
        if self._max_attempts is not None and attempts >= self._max_attempts:
            log.warning(
                "%s rejection loop gave up after %d attempts (mode=%s, bounds=%s)",
                loop,
                attempts,
                self._mode.value,
                self._bounds,
            )
            raise RejectionLimitError(
                f"{loop} exceeded {self._max_attempts} attempts"
            )

    # ── Draws ────────────────────────────────────────────────────────

    def pick_start(self) -> tuple[float, float]:
        """Sample a start point inside the current rectangle.

        Uniform mode maps two uniform draws affinely onto each axis.
        Gaussian mode keeps drawing pairs until both components lie
        strictly inside the half-extents.
        """
        rng = self._rng
        if self._mode is WalkMode.UNIFORM:
            x = rng.next_uniform() * self._width - self._bounds.max_x
            y = rng.next_uniform() * self._height - self._bounds.max_y
            return x, y

        attempts = 0
        while True:
            self._check_attempts(attempts, "start")
            attempts += 1
            g1, g2 = rng.next_gaussian_pair()
            if abs(g1) < self._bounds.max_x and abs(g2) < self._bounds.max_y:
                return g1, g2

    def _step_distance(self) -> float:
        """Draw a non-negative step length in [0, 1]."""
        rng = self._rng
        if self._mode is WalkMode.UNIFORM:
            return rng.next_uniform()

        # One accepted value per pair; the first component wins ties.
        attempts = 0
        while True:
            self._check_attempts(attempts, "step distance")
            attempts += 1
            g1, g2 = rng.next_gaussian_pair()
            if abs(g1) <= 1:
                return abs(g1)
            if abs(g2) <= 1:
                return abs(g2)

    def _reached(self, x: float, y: float) -> bool:
        dx, dy = self._destination
        return abs(x - dx) < DESTINATION_TOLERANCE and abs(y - dy) < DESTINATION_TOLERANCE

    # ── Walk ─────────────────────────────────────────────────────────

    def walk(self, steps: int = DEFAULT_STEPS) -> Trajectory:
        """Run the walk for up to ``steps`` accepted moves.

        Each attempt redraws distance, axis and sign together; a candidate
        outside the rectangle is discarded. The destination check runs only
        after an accepted move, never against the start point.

        Args:
            steps: Maximum number of accepted moves.

        Returns:
            Trajectory with ``len <= steps + 1`` starting at ``start``.

        Raises:
            ValueError: If steps is negative.
            RejectionLimitError: If max_attempts is set and exceeded.
        """
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")

        rng = self._rng
        bounds = self._bounds
        points: list[tuple[float, float]] = [self._start]
        status = WalkStatus.EXHAUSTED
        rejected = 0

        for _ in range(steps):
            attempts = 0
            while True:
                self._check_attempts(attempts, "boundary")
                attempts += 1
                x, y = points[-1]
                d = self._step_distance()
                along_x = rng.next_binary()
                sign = 1 if rng.next_binary() else -1

                if along_x:
                    x += d * sign
                else:
                    y += d * sign

                if bounds.contains(x, y):
                    points.append((x, y))
                    break
                rejected += 1

            if self._reached(x, y):
                status = WalkStatus.REACHED_DESTINATION
                break

        log.debug(
            "Walk finished: %s after %d steps (%d rejected candidates)",
            status.value,
            len(points) - 1,
            rejected,
        )
        return Trajectory(
            points=np.array(points, dtype=np.float64).reshape(-1, 2),
            status=status,
            steps_requested=steps,
            rejected=rejected,
        )

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def mode(self) -> WalkMode:
        return self._mode

    @property
    def generator(self) -> MiddleSquareGenerator:
        return self._rng

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def x_range(self) -> tuple[float, float]:
        return self._bounds.min_x, self._bounds.max_x

    @property
    def y_range(self) -> tuple[float, float]:
        return self._bounds.min_y, self._bounds.max_y

    @property
    def destination(self) -> tuple[float, float]:
        return self._destination

    @property
    def start(self) -> tuple[float, float]:
        return self._start

    # ── Mutators (no containment re-validation) ──────────────────────

    def set_dimensions(self, width: float, height: float) -> None:
        self._width = float(width)
        self._height = float(height)
        self._bounds = Bounds.centered(self._width, self._height)

    def set_start(self, x: float, y: float) -> None:
        self._start = (float(x), float(y))

    def set_destination(self, x: float, y: float) -> None:
        self._destination = (float(x), float(y))


def simulate(config: "WalkConfig") -> tuple[RandomWalk, Trajectory]:
    """Build a RandomWalk from a WalkConfig and run it.

    Args:
        config: Walk configuration (mode, seed, geometry, steps, cap).

    Returns:
        Tuple of (simulator, trajectory) so collaborators can read the
        walk's geometry alongside the points.
    """
    walker = RandomWalk(
        config.mode,
        seed=config.seed,
        width=config.width,
        height=config.height,
        destination=config.destination,
        start=config.start,
        max_attempts=config.max_attempts,
    )
    trajectory = walker.walk(config.steps)
    log.info(
        "Walk (mode=%s, seed=%d): %s, %d points, end=(%.5f, %.5f)",
        walker.mode.value,
        walker.generator.seed,
        trajectory.status.value,
        len(trajectory),
        *trajectory.end,
    )
    return walker, trajectory
