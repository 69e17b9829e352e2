"""mars_rover.components
=======================

Immutable value components shared by the planet and rover state::

    from mars_rover.components import GridSize, Position

Both are frozen dataclasses with structural equality; ``clone`` returns a new
instance rather than mutating.
"""

from .grid_size import GridSize
from .position import Position

__all__ = [
    "GridSize",
    "Position",
]
