"""Built-in transition tables and candidate generation.

Turning is a pure lookup on the heading. Stepping maps (heading, command) to
a unit displacement, applies it, and wraps the moved coordinate onto the
planet (toroidal, "Pac-Man" edges). Functions here never look at obstacles;
:func:`mars_rover.step.move` decides whether the candidate is accepted.

Every table is keyed by *all* members of its enum so a new heading or
command fails with ``KeyError`` at the first lookup instead of silently
falling through.
"""

from typing import Dict, Tuple

from mars_rover.commands import MOVE_COMMANDS, TURN_COMMANDS, Command
from mars_rover.components import Position
from mars_rover.planet import Planet
from mars_rover.state import RoverState
from mars_rover.types import Orientation
from mars_rover.utils.math import add, wrap_grid_position


TURN_LEFT: Dict[Orientation, Orientation] = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.WEST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
}

TURN_RIGHT: Dict[Orientation, Orientation] = {
    Orientation.NORTH: Orientation.EAST,
    Orientation.EAST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.WEST,
    Orientation.WEST: Orientation.NORTH,
}

TURN_TABLE: Dict[Command, Dict[Orientation, Orientation]] = {
    Command.TURN_LEFT: TURN_LEFT,
    Command.TURN_RIGHT: TURN_RIGHT,
}

# Forward displacement per heading; backward is the negation.
FORWARD_DELTA: Dict[Orientation, Tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}

DIRECTION_SIGN: Dict[Command, int] = {
    Command.GO_FORWARD: 1,
    Command.GO_BACKWARD: -1,
}


def turn(orientation: Orientation, command: Command) -> Orientation:
    """Return the heading after a turn command."""
    return TURN_TABLE[command][orientation]


def displacement(orientation: Orientation, command: Command) -> Tuple[int, int]:
    """Unit ``(dx, dy)`` for a step command given the current heading."""
    dx, dy = FORWARD_DELTA[orientation]
    sign = DIRECTION_SIGN[command]
    return dx * sign, dy * sign


def next_position(pos: Position, planet: Planet, dx: int, dy: int) -> Position:
    """Apply ``(dx, dy)`` and wrap the moved axis onto the planet.

    Only a non-zero component is touched, so the other coordinate is carried
    over exactly as it was.
    """
    if dx:
        pos = pos.clone(x=wrap_grid_position(add(pos.x, dx), planet.width))
    if dy:
        pos = pos.clone(y=wrap_grid_position(add(pos.y, dy), planet.height))
    return pos


def candidate_state(state: RoverState, planet: Planet, command: Command) -> RoverState:
    """Compute the state the rover would reach, ignoring obstacles.

    Raises:
        ValueError: If ``command`` is not a :class:`Command` member.
    """
    if command in TURN_COMMANDS:
        return state.clone(orientation=turn(state.orientation, command))
    if command in MOVE_COMMANDS:
        dx, dy = displacement(state.orientation, command)
        return state.clone(position=next_position(state.position, planet, dx, dy))
    raise ValueError(f"Command is not valid: {command!r}")

