"""Common type aliases and enumerations.

``Orientation`` is the rover heading. ``MoveFn`` is the signature shared by
the single-command transition and anything wanting to stand in for it (e.g.
test doubles folded by the batch processor).
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, Union, TYPE_CHECKING


# Annotation-only imports (planet and state import this module at runtime):
if TYPE_CHECKING:
    from mars_rover.commands import Command
    from mars_rover.planet import Planet
    from mars_rover.state import CollisionDetected, RoverState

Coordinate = Tuple[int, int]

MoveResult = Union["RoverState", "CollisionDetected"]
MoveFn = Callable[["RoverState", "Planet", "Command"], MoveResult]


class Orientation(StrEnum):
    """Cardinal heading of the rover. North is +y, East is +x."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()
