"""Command enumerations.

Defines the human readable :class:`Command` (string enum) used by the engine
and a stable integer :class:`GymCommand` mapping for Gymnasium compatibility.

``MOVE_COMMANDS`` / ``TURN_COMMANDS`` are the canonical ordered groupings;
checks like ``if command in TURN_COMMANDS`` are preferred over name
comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple


class Command(StrEnum):
    """String enum of rover commands.

    Members:
        TURN_LEFT, TURN_RIGHT: Rotate 90 degrees in place.
        GO_FORWARD, GO_BACKWARD: Step one tile along the current heading.
    """

    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    GO_FORWARD = auto()
    GO_BACKWARD = auto()


TURN_COMMANDS = [Command.TURN_LEFT, Command.TURN_RIGHT]
MOVE_COMMANDS = [Command.GO_FORWARD, Command.GO_BACKWARD]


class GymCommand(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    TURN_LEFT = 0
    TURN_RIGHT = auto()
    GO_FORWARD = auto()
    GO_BACKWARD = auto()


COMMAND_LETTERS: Dict[str, Command] = {
    "L": Command.TURN_LEFT,
    "R": Command.TURN_RIGHT,
    "F": Command.GO_FORWARD,
    "B": Command.GO_BACKWARD,
}


def parse_commands(text: str) -> Tuple[Command, ...]:
    """Parse a compact command string such as ``"FFRB"``.

    Letters are case-insensitive and whitespace is ignored.

    Raises:
        ValueError: On any letter outside ``COMMAND_LETTERS``.
    """
    commands: list[Command] = []
    for index, letter in enumerate(text):
        if letter.isspace():
            continue
        command = COMMAND_LETTERS.get(letter.upper())
        if command is None:
            raise ValueError(f"Unknown command letter {letter!r} at index {index}")
        commands.append(command)
    return tuple(commands)


def from_gym_command(index: int) -> Command:
    """Map a ``Discrete`` action index back to its :class:`Command`."""
    try:
        gym_command = GymCommand(int(index))
    except ValueError:
        raise ValueError(f"Invalid command index: {index}") from None
    return Command[gym_command.name]
