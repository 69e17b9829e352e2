"""Plain-text planet authoring and rendering.

Maps are written North-up: the first row is ``y = height - 1`` and the last
row is ``y = 0``, matching the orientation of the grid diagrams in
:mod:`mars_rover.components.grid_size`.

Glyphs:
    ``.`` free tile, ``#`` obstacle, ``^ v > <`` rover facing N/S/E/W.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from mars_rover.components import Position
from mars_rover.planet import Planet, create_planet
from mars_rover.state import RoverState
from mars_rover.types import Orientation

FREE = "."
OBSTACLE = "#"

ROVER_GLYPHS: Dict[Orientation, str] = {
    Orientation.NORTH: "^",
    Orientation.SOUTH: "v",
    Orientation.EAST: ">",
    Orientation.WEST: "<",
}
GLYPH_ORIENTATION: Dict[str, Orientation] = {v: k for k, v in ROVER_GLYPHS.items()}


def planet_from_ascii(
    rows: Union[str, Sequence[str]],
) -> Tuple[Planet, Optional[RoverState]]:
    """Parse a North-up text map.

    Arguments:
        rows: Either a multi-line string or a sequence of row strings.
            Surrounding blank lines and per-line indentation are stripped.

    Returns:
        The planet and the rover state if a rover glyph was present.

    Raises:
        ValueError: On empty maps, ragged rows, unknown glyphs or more than
            one rover.
    """
    if isinstance(rows, str):
        rows = rows.splitlines()
    lines = [line.strip() for line in rows if line.strip()]
    if not lines:
        raise ValueError("Map is empty")

    width = len(lines[0])
    height = len(lines)
    obstacles: List[Position] = []
    rover: Optional[RoverState] = None

    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Row {row} has width {len(line)}, expected {width}")
        y = height - 1 - row
        for x, glyph in enumerate(line):
            if glyph == FREE:
                continue
            if glyph == OBSTACLE:
                obstacles.append(Position(x, y))
            elif glyph in GLYPH_ORIENTATION:
                if rover is not None:
                    raise ValueError("Map contains more than one rover")
                rover = RoverState(Position(x, y), GLYPH_ORIENTATION[glyph])
            else:
                raise ValueError(f"Unknown glyph {glyph!r} at ({x}, {y})")

    return create_planet(width, height, obstacles), rover


def render_ascii(planet: Planet, state: Optional[RoverState] = None) -> str:
    """Render ``planet`` (and optionally the rover) as a North-up text map."""
    lines: List[str] = []
    for y in reversed(range(planet.height)):
        line: List[str] = []
        for x in range(planet.width):
            pos = Position(x, y)
            if state is not None and state.position == pos:
                line.append(ROVER_GLYPHS[state.orientation])
            elif planet.has_obstacle_at(pos):
                line.append(OBSTACLE)
            else:
                line.append(FREE)
        lines.append("".join(line))
    return "\n".join(lines)
