"""Simulation configuration.

``SimulationConfig`` is a plain frozen dataclass so it can be built from a
dictionary loaded by the caller (JSON, TOML, CLI flags...) and turned into
the engine's value objects with :meth:`SimulationConfig.build`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from mars_rover.components import Position
from mars_rover.planet import Planet, create_planet
from mars_rover.state import RoverState
from mars_rover.types import Coordinate, Orientation
from mars_rover.utils.grid import is_in_bounds

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 4


@dataclass(frozen=True)
class SimulationConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    obstacles: Tuple[Coordinate, ...] = ()
    start_x: int = 0
    start_y: int = 0
    orientation: Orientation = Orientation.NORTH

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SimulationConfig:
        """Create a config from a plain mapping.

        Unknown keys are rejected. ``orientation`` is matched case-insensitively
        against the member values (``"north"``, ``"EAST"``, ...).

        Raises:
            ValueError: On unknown keys or malformed values.
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for key in ("width", "height", "start_x", "start_y"):
            if key in data:
                kwargs[key] = _as_int(data[key], key)
        if "obstacles" in data:
            obstacles = data["obstacles"]
            if not isinstance(obstacles, (list, tuple)):
                raise ValueError(
                    f"obstacles must be a sequence of (x, y) pairs, got {obstacles!r}"
                )
            kwargs["obstacles"] = tuple(
                _as_coordinate(obs, i) for i, obs in enumerate(obstacles)
            )
        if "orientation" in data:
            kwargs["orientation"] = _as_orientation(data["orientation"])
        return cls(**kwargs)

    def build(self) -> Tuple[Planet, RoverState]:
        """Construct the planet and initial rover state.

        Raises:
            ValueError: If the start tile is outside the grid or on an obstacle.
        """
        planet = create_planet(self.width, self.height, self.obstacles)
        start = Position(self.start_x, self.start_y)
        if not is_in_bounds(planet, start):
            raise ValueError(
                f"Start {(start.x, start.y)} is outside the "
                f"{self.width}x{self.height} grid"
            )
        if planet.has_obstacle_at(start):
            raise ValueError(f"Start {(start.x, start.y)} is on an obstacle")
        outside = [obs for obs in planet.obstacles if not is_in_bounds(planet, obs)]
        if outside:
            logger.warning(
                "%d obstacle(s) lie outside the grid and are unreachable", len(outside)
            )
        return planet, RoverState(position=start, orientation=self.orientation)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _as_coordinate(value: Any, index: int) -> Coordinate:
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(
            f"obstacles[{index}] must be an (x, y) pair, got {value!r}"
        ) from None
    return _as_int(x, f"obstacles[{index}].x"), _as_int(y, f"obstacles[{index}].y")


def _as_orientation(value: Any) -> Orientation:
    if isinstance(value, Orientation):
        return value
    try:
        return Orientation(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown orientation: {value!r}") from None
