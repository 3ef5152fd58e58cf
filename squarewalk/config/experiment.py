"""Walk configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

from squarewalk.walk.types import WalkMode


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Everything needed to reproduce one walk.

    Field validation runs in __post_init__ to reject invalid
    configurations early. A zero width or height is accepted: it is the
    degenerate rectangle that only a retry cap can bail out of.
    """

    mode: WalkMode = WalkMode.UNIFORM
    seed: int = 19890929
    width: float = 4.0
    height: float = 4.0
    destination: tuple[float, float] = (0.0, 0.0)
    start: tuple[float, float] | None = None  # None = sample at construction
    steps: int = 100
    max_attempts: int | None = None  # None = unbounded rejection loops
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.mode, WalkMode):
            # Frozen dataclass: coerce the string form through object.__setattr__.
            try:
                object.__setattr__(self, "mode", WalkMode(self.mode))
            except ValueError:
                raise ValueError(
                    f"mode must be one of {[m.value for m in WalkMode]}, "
                    f"got {self.mode!r}"
                ) from None
        if self.steps < 0:
            raise ValueError(f"steps ({self.steps}) must be >= 0")
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"width ({self.width}) and height ({self.height}) must be >= 0"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(
                f"max_attempts ({self.max_attempts}) must be >= 1 or None"
            )
        if len(self.destination) != 2:
            raise ValueError(f"destination must be an (x, y) pair, got {self.destination}")
        if self.start is not None and len(self.start) != 2:
            raise ValueError(f"start must be an (x, y) pair, got {self.start}")
