"""GridSize component.

Bounds of the toroidal grid. Example 5x4 grid::

                    North
          +-----+-----+-----+-----+-----+
          | 0,3 | 1,3 | 2,3 | 3,3 | 4,3 |
          +-----+-----+-----+-----+-----+
          | 0,2 | 1,2 | 2,2 | 3,2 | 4,2 |
    West  +-----+-----+-----+-----+-----+  East
          | 0,1 | 1,1 | 2,1 | 3,1 | 4,1 |
          +-----+-----+-----+-----+-----+
          | 0,0 | 1,0 | 2,0 | 3,0 | 4,0 |
          +-----+-----+-----+-----+-----+
                    South
"""

from dataclasses import dataclass, replace
from typing import Optional

from mars_rover.utils.math import check_int


@dataclass(frozen=True)
class GridSize:
    """Grid dimensions in tiles.

    Attributes:
        width: Number of columns (> 0).
        height: Number of rows (> 0).
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", check_int(self.width, "width"))
        object.__setattr__(self, "height", check_int(self.height, "height"))
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid size must be positive, got {self.width}x{self.height}"
            )

    def clone(
        self, width: Optional[int] = None, height: Optional[int] = None
    ) -> "GridSize":
        """Return a copy with ``width`` and/or ``height`` overridden."""
        return replace(
            self,
            width=self.width if width is None else width,
            height=self.height if height is None else height,
        )
