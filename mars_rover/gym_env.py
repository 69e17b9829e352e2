"""Gymnasium environment wrapper for the rover engine.

Each ``step`` applies one :class:`~mars_rover.commands.Command` through
:func:`mars_rover.step.move`. A rejected move keeps the rover in place and
yields ``collision_penalty`` as reward; accepted moves yield ``0.0``. There is
no goal, so ``terminated`` is always ``False`` and episodes end by
``truncated`` once ``max_steps`` is reached.

Observation schema:

``{"grid": np.ndarray(H, W) int8, "position": np.ndarray(2,) int64, "orientation": int}``

``grid`` uses the codes from :mod:`mars_rover.levels.convert` (row 0 is the
South edge).

Usage:

``env = RoverEnv(width=5, height=4, obstacles=[(0, 2)])``
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from mars_rover.commands import from_gym_command
from mars_rover.components import Position
from mars_rover.levels.convert import ROVER_CELL, planet_to_array
from mars_rover.levels.text import render_ascii
from mars_rover.planet import Planet, create_planet
from mars_rover.state import CollisionDetected, RoverState, create_rover
from mars_rover.step import move
from mars_rover.types import Coordinate, Orientation
from mars_rover.utils.grid import is_in_bounds

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]

ORIENTATION_INDEX: List[Orientation] = list(Orientation)


class RoverEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` around a single rover on a fixed planet.

    The action space is ``Discrete(4)``; see
    :class:`mars_rover.commands.GymCommand` for the index mapping.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        width: int = 5,
        height: int = 4,
        obstacles: Iterable[Union[Position, Coordinate]] = (),
        initial_state: Optional[RoverState] = None,
        planet: Optional[Planet] = None,
        max_steps: int = 100,
        collision_penalty: float = -1.0,
        render_mode: str = "ansi",
    ):
        """Create a new environment instance.

        Arguments:
            width, height, obstacles: Planet description, ignored if ``planet``
                is given.
            initial_state: Rover state restored on ``reset`` (default
                ``(0, 0)`` facing North).
            planet: Prebuilt planet.
            max_steps: Steps before ``truncated`` is reported.
            collision_penalty: Reward for a rejected move.
            render_mode: Only ``"ansi"`` (text) is supported.
        """
        self.planet: Planet = (
            planet if planet is not None else create_planet(width, height, obstacles)
        )
        self._initial_state = (
            initial_state if initial_state is not None else create_rover(0, 0)
        )
        if not is_in_bounds(self.planet, self._initial_state.position):
            raise ValueError("Initial rover position is outside the planet")
        if self.planet.has_obstacle_at(self._initial_state.position):
            raise ValueError("Initial rover position is on an obstacle")
        self.max_steps = max_steps
        self.collision_penalty = collision_penalty
        self.render_mode = render_mode

        self.state: Optional[RoverState] = None
        self.turn: int = 0

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=ROVER_CELL,
                    shape=(self.planet.height, self.planet.width),
                    dtype=np.int8,
                ),
                "position": spaces.Box(
                    low=np.zeros(2, dtype=np.int64),
                    high=np.array(
                        [self.planet.width - 1, self.planet.height - 1], dtype=np.int64
                    ),
                    dtype=np.int64,
                ),
                "orientation": spaces.Discrete(len(ORIENTATION_INDEX)),
            }
        )
        self.action_space = spaces.Discrete(4)

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Restore the initial rover state.

        Arguments:
            seed: Forwarded to ``gym.Env.reset`` (the planet is fixed).
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = self._initial_state
        self.turn = 0
        return self._get_obs(), self._get_info(None)

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one command.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        command = from_gym_command(int(action))
        result = move(self.state, self.planet, command)
        self.turn += 1

        collision: Optional[CollisionDetected] = None
        if isinstance(result, CollisionDetected):
            collision = result
            reward = float(self.collision_penalty)
        else:
            self.state = result
            reward = 0.0

        truncated = self.turn >= self.max_steps
        if truncated:
            logger.debug("Episode truncated after %d steps", self.turn)
        return self._get_obs(), reward, False, truncated, self._get_info(collision)

    def render(self) -> Optional[str]:  # type: ignore[override]
        """Return the North-up text map of the planet and rover."""
        assert self.state is not None
        if self.render_mode != "ansi":
            raise NotImplementedError(
                f"Render mode '{self.render_mode}' not supported."
            )
        return render_ascii(self.planet, self.state)

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return {
            "grid": planet_to_array(self.planet, self.state),
            "position": np.array(
                [self.state.position.x, self.state.position.y], dtype=np.int64
            ),
            "orientation": ORIENTATION_INDEX.index(self.state.orientation),
        }

    def _get_info(self, collision: Optional[CollisionDetected]) -> Dict[str, object]:
        obstacle = (
            None
            if collision is None
            else (collision.obstacle_position.x, collision.obstacle_position.y)
        )
        return {
            "collision": collision is not None,
            "obstacle_position": obstacle,
            "turn": self.turn,
        }
