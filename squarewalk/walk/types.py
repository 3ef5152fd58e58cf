"""Walk data structures: mode, status, bounds, and trajectory."""

from dataclasses import dataclass
from enum import Enum

import numpy as np


class WalkMode(str, Enum):
    """Distribution governing both start selection and step distance."""

    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"


class WalkStatus(str, Enum):
    """Terminal state of a finished walk."""

    REACHED_DESTINATION = "reached_destination"
    EXHAUSTED = "exhausted"


class RejectionLimitError(RuntimeError):
    """Raised when a capped rejection loop exceeds its attempt budget."""


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned rectangle; containment is inclusive on every edge."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def centered(cls, width: float, height: float) -> "Bounds":
        """Rectangle of the given size centred on the origin."""
        max_x = width / 2.0
        max_y = height / 2.0
        return cls(min_x=0 - max_x, max_x=max_x, min_y=0 - max_y, max_y=max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return not (x > self.max_x or x < self.min_x or y > self.max_y or y < self.min_y)


@dataclass(frozen=True)
class Trajectory:
    """Immutable result of one walk.

    Holds the visited points in order (first row is the start) together
    with how the walk ended. Uses frozen=True but omits slots=True since
    numpy arrays don't interact well with __slots__.
    """

    points: np.ndarray  # float64 array of shape (n_points, 2)
    status: WalkStatus
    steps_requested: int
    rejected: int = 0  # out-of-bounds candidates discarded

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def xs(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def ys(self) -> np.ndarray:
        return self.points[:, 1]

    @property
    def start(self) -> tuple[float, float]:
        return float(self.points[0, 0]), float(self.points[0, 1])

    @property
    def end(self) -> tuple[float, float]:
        return float(self.points[-1, 0]), float(self.points[-1, 1])

    @property
    def steps_taken(self) -> int:
        return len(self) - 1
