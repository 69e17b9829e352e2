"""Stateful-cell variant of the engine.

For live simulations that receive commands one at a time, the current
:class:`~mars_rover.state.RoverState` lives in a single
:class:`RoverStateRef`. Only :func:`move_ref` / :func:`process_batch_ref`
write to it, one step at a time; a collision leaves the cell untouched so
its value is always the last valid state. There is no locking: one writer at
a time is expected.
"""

import logging
from typing import Callable, Optional

from mars_rover.commands import Command, parse_commands
from mars_rover.planet import Planet
from mars_rover.state import CollisionDetected, RoverState
from mars_rover.step import Commands, move

logger = logging.getLogger(__name__)


class RoverStateRef:
    """Mutable cell holding the current rover state."""

    def __init__(self, state: RoverState) -> None:
        self._state = state

    def get(self) -> RoverState:
        return self._state

    def set(self, state: RoverState) -> None:
        self._state = state

    def update(self, fn: Callable[[RoverState], RoverState]) -> RoverState:
        """Replace the value with ``fn(current)`` and return the new value."""
        self._state = fn(self._state)
        return self._state

    def __repr__(self) -> str:
        return f"RoverStateRef({self._state!r})"


def move_ref(
    ref: RoverStateRef, planet: Planet, command: Command
) -> Optional[CollisionDetected]:
    """Apply one command to the state held in ``ref``.

    Returns:
        Optional[CollisionDetected]: ``None`` on success (``ref`` updated),
            otherwise the collision (``ref`` unchanged).
    """
    result = move(ref.get(), planet, command)
    if isinstance(result, CollisionDetected):
        return result
    ref.set(result)
    return None


def process_batch_ref(
    ref: RoverStateRef, planet: Planet, commands: Commands
) -> Optional[CollisionDetected]:
    """Apply commands in order through :func:`move_ref`.

    Stops at the first collision and returns it; the final state is read from
    ``ref`` afterwards.

    Raises:
        ValueError: If ``commands`` is empty.
    """
    if isinstance(commands, str):
        commands = parse_commands(commands)

    applied = 0
    for command in commands:
        collision = move_ref(ref, planet, command)
        if collision is not None:
            logger.info("Batch halted after %d command(s)", applied)
            return collision
        applied += 1

    if applied == 0:
        raise ValueError("Command batch must not be empty")
    return None
