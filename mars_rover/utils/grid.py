"""Grid bounds / collision helpers.

Pure predicates used by the transition function and the level tooling.
"""

from mars_rover.components import Position
from mars_rover.planet import Planet


def is_in_bounds(planet: Planet, pos: Position) -> bool:
    """Return True if ``pos`` lies within the planet rectangle."""
    return 0 <= pos.x < planet.width and 0 <= pos.y < planet.height


def is_blocked_at(planet: Planet, pos: Position) -> bool:
    """Return True if an obstacle occupies ``pos`` (value equality)."""
    return planet.has_obstacle_at(pos)
