"""Single-command transition and batch reducer.

:func:`move` is the one place a rover state advances. It is pure: it returns
either a *new* :class:`~mars_rover.state.RoverState` or a
:class:`~mars_rover.state.CollisionDetected` value and never touches its
inputs. :func:`process_batch` folds commands through :func:`move` strictly in
order and short-circuits on the first collision.

Ordering within :func:`move`:

1. Compute the candidate (turn lookup, or unit step then wrap).
2. Turns are accepted unconditionally.
3. Steps are checked against the obstacle set *after* wrapping, so an
   obstacle sitting on the far edge is still hit when crossing it.
"""

import logging
from typing import Iterable, Union

from mars_rover.commands import TURN_COMMANDS, Command, parse_commands
from mars_rover.moves import candidate_state
from mars_rover.planet import Planet
from mars_rover.state import CollisionDetected, RoverState
from mars_rover.types import MoveFn, MoveResult
from mars_rover.utils.grid import is_blocked_at

logger = logging.getLogger(__name__)

Commands = Union[str, Iterable[Command]]


def move(state: RoverState, planet: Planet, command: Command) -> MoveResult:
    """Apply one command to the rover.

    Args:
        state (RoverState): Current rover state.
        planet (Planet): Planet bounds and obstacles.
        command (Command): Command to apply.

    Returns:
        MoveResult: The next ``RoverState``, or ``CollisionDetected`` carrying
            the obstacle position and the unchanged ``state``.

    Raises:
        ValueError: If ``command`` is not recognized.
    """
    next_state = candidate_state(state, planet, command)

    if command in TURN_COMMANDS:
        logger.debug(
            "%s: heading %s -> %s", command, state.orientation, next_state.orientation
        )
        return next_state

    if is_blocked_at(planet, next_state.position):
        logger.info(
            "%s blocked by obstacle at (%d, %d); rover stays at (%d, %d) facing %s",
            command,
            next_state.position.x,
            next_state.position.y,
            state.position.x,
            state.position.y,
            state.orientation,
        )
        return CollisionDetected(
            obstacle_position=next_state.position, rover_state=state
        )

    logger.debug(
        "%s: (%d, %d) -> (%d, %d)",
        command,
        state.position.x,
        state.position.y,
        next_state.position.x,
        next_state.position.y,
    )
    return next_state


def process_batch(
    state: RoverState,
    planet: Planet,
    commands: Commands,
    move_fn: MoveFn = move,
) -> MoveResult:
    """Apply commands left to right, stopping at the first collision.

    Args:
        state (RoverState): Initial rover state.
        planet (Planet): Planet bounds and obstacles.
        commands (str | Iterable[Command]): Non-empty ordered commands; a
            string is parsed with :func:`mars_rover.commands.parse_commands`.
        move_fn (MoveFn): Single-command transition, :func:`move` by default.

    Returns:
        MoveResult: State after the last command, or the first
            ``CollisionDetected`` unchanged (remaining commands are skipped).

    Raises:
        ValueError: If ``commands`` is empty or contains an unknown command.
    """
    if isinstance(commands, str):
        commands = parse_commands(commands)

    applied = 0
    for command in commands:
        result = move_fn(state, planet, command)
        if isinstance(result, CollisionDetected):
            logger.info("Batch halted after %d command(s)", applied)
            return result
        state = result
        applied += 1

    if applied == 0:
        raise ValueError("Command batch must not be empty")
    return state
