"""Walk simulation module: types and the bounded random-walk simulator."""

from squarewalk.walk.simulator import DESTINATION_TOLERANCE, RandomWalk, simulate
from squarewalk.walk.types import (
    Bounds,
    RejectionLimitError,
    Trajectory,
    WalkMode,
    WalkStatus,
)

__all__ = [
    "Bounds",
    "DESTINATION_TOLERANCE",
    "RandomWalk",
    "RejectionLimitError",
    "Trajectory",
    "WalkMode",
    "WalkStatus",
    "simulate",
]
