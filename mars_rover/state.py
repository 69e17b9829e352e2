"""Immutable rover state and the collision outcome.

:class:`RoverState` is the value replaced at each simulation step; the engine
never mutates one in place. :class:`CollisionDetected` is *returned* (not
raised) by :func:`mars_rover.step.move` when a step would land on an
obstacle. It carries the state from *before* the rejected step so callers can
carry on from a known-good position.
"""

from dataclasses import dataclass, replace
from typing import Optional

from mars_rover.components import Position
from mars_rover.types import Orientation


@dataclass(frozen=True)
class RoverState:
    """Position and heading of the rover.

    Attributes:
        position (Position): Current tile.
        orientation (Orientation): Current heading.
    """

    position: Position
    orientation: Orientation

    def clone(
        self,
        position: Optional[Position] = None,
        orientation: Optional[Orientation] = None,
    ) -> "RoverState":
        """Return a copy with ``position`` and/or ``orientation`` overridden."""
        return replace(
            self,
            position=self.position if position is None else position,
            orientation=self.orientation if orientation is None else orientation,
        )


@dataclass(frozen=True)
class CollisionDetected:
    """A move was rejected because the destination holds an obstacle.

    Attributes:
        obstacle_position (Position): Wrapped destination that is blocked.
        rover_state (RoverState): Last valid state (before the attempted step).
    """

    obstacle_position: Position
    rover_state: RoverState

    @property
    def message(self) -> str:
        pos = self.obstacle_position
        return f"Obstacle detected at ({pos.x}, {pos.y})"


def create_rover(
    x: int, y: int, orientation: Orientation = Orientation.NORTH
) -> RoverState:
    """Convenience factory for a rover at ``(x, y)``."""
    return RoverState(position=Position(x, y), orientation=orientation)


def is_collision(result: object) -> bool:
    """Return True if a move / batch result is a :class:`CollisionDetected`."""
    return isinstance(result, CollisionDetected)
