"""Position component.

Immutable integer grid coordinates. ``y`` grows towards North and ``x``
towards East, so ``(0, 0)`` is the South-West corner of a planet.
"""

from dataclasses import dataclass, replace
from typing import Optional

from mars_rover.utils.math import check_int


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at West edge).
        y: Row index (0 at South edge).
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        # Stored as plain ints so numpy coordinates compare and hash the same.
        object.__setattr__(self, "x", check_int(self.x, "x"))
        object.__setattr__(self, "y", check_int(self.y, "y"))

    def clone(self, x: Optional[int] = None, y: Optional[int] = None) -> "Position":
        """Return a copy with ``x`` and/or ``y`` overridden."""
        return replace(
            self,
            x=self.x if x is None else x,
            y=self.y if y is None else y,
        )
