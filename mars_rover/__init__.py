"""Mars rover simulation on a toroidal grid.

Import surface for the engine::

    from mars_rover import Command, Orientation, create_planet, create_rover, process_batch

    planet = create_planet(5, 4, obstacles=[(0, 2)])
    result = process_batch(create_rover(0, 0), planet, "FFR")
"""

from mars_rover.commands import Command, GymCommand, parse_commands
from mars_rover.components import GridSize, Position
from mars_rover.planet import Planet, create_planet
from mars_rover.ref import RoverStateRef, move_ref, process_batch_ref
from mars_rover.state import CollisionDetected, RoverState, create_rover, is_collision
from mars_rover.step import move, process_batch
from mars_rover.types import MoveResult, Orientation
from mars_rover.utils.math import wrap_grid_position

__all__ = [
    "CollisionDetected",
    "Command",
    "GridSize",
    "GymCommand",
    "MoveResult",
    "Orientation",
    "Planet",
    "Position",
    "RoverState",
    "RoverStateRef",
    "create_planet",
    "create_rover",
    "is_collision",
    "move",
    "move_ref",
    "parse_commands",
    "process_batch",
    "process_batch_ref",
    "wrap_grid_position",
]
