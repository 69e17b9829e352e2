"""Numeric grid conversion (used by the Gymnasium observation)."""

from typing import Optional

import numpy as np
import numpy.typing as npt

from mars_rover.planet import Planet
from mars_rover.state import RoverState
from mars_rover.utils.grid import is_in_bounds

FREE_CELL = 0
OBSTACLE_CELL = 1
ROVER_CELL = 2


def planet_to_array(
    planet: Planet, state: Optional[RoverState] = None
) -> npt.NDArray[np.int8]:
    """Return a ``(height, width)`` int8 grid indexed ``[y, x]``.

    Row 0 is the South edge (``y = 0``). Obstacles outside the grid are
    skipped.
    """
    grid = np.full((planet.height, planet.width), FREE_CELL, dtype=np.int8)
    for obs in planet.obstacles:
        if is_in_bounds(planet, obs):
            grid[obs.y, obs.x] = OBSTACLE_CELL
    if state is not None:
        grid[state.position.y, state.position.x] = ROVER_CELL
    return grid
