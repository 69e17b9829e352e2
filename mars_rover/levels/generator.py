"""Procedural planet generation.

Obstacles are sampled uniformly without replacement from the tiles not listed
in ``keep_free``. A fixed ``seed`` reproduces the same planet.
"""

import random
from typing import Iterable, Optional

from mars_rover.components import Position
from mars_rover.planet import Planet, create_planet


def generate_planet(
    width: int,
    height: int,
    obstacle_density: float = 0.1,
    seed: Optional[int] = None,
    keep_free: Iterable[Position] = (),
) -> Planet:
    """Generate a planet with randomly placed obstacles.

    Args:
        width (int): Grid width.
        height (int): Grid height.
        obstacle_density (float): Fraction of the free-able tiles to block,
            in ``[0, 1]``.
        seed (int | None): RNG seed for reproducibility.
        keep_free (Iterable[Position]): Tiles that must stay free (e.g. the
            rover start).

    Returns:
        Planet: New planet.

    Raises:
        ValueError: If ``obstacle_density`` is outside ``[0, 1]``.
    """
    if not 0.0 <= obstacle_density <= 1.0:
        raise ValueError(
            f"obstacle_density must be in [0, 1], got {obstacle_density}"
        )

    rng = random.Random(seed)
    reserved = set(keep_free)
    candidates = [
        Position(x, y)
        for y in range(height)
        for x in range(width)
        if Position(x, y) not in reserved
    ]
    count = int(len(candidates) * obstacle_density)
    return create_planet(width, height, rng.sample(candidates, count))
