"""Planet: grid bounds plus the obstacle set.

A planet is immutable for the whole simulation. Obstacles are stored as a
persistent set (``pyrsistent.PSet``) of :class:`Position` so membership uses
value equality and the planet itself stays hashable.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Union

from pyrsistent import pset
from pyrsistent.typing import PSet

from mars_rover.components import GridSize, Position
from mars_rover.types import Coordinate


@dataclass(frozen=True)
class Planet:
    """Toroidal planet surface.

    Attributes:
        size (GridSize): Grid bounds.
        obstacles (PSet[Position]): Tiles the rover may never occupy.
    """

    size: GridSize
    obstacles: PSet[Position] = pset()

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def clone(
        self,
        size: Optional[GridSize] = None,
        obstacles: Optional[PSet[Position]] = None,
    ) -> "Planet":
        """Return a copy with ``size`` and/or ``obstacles`` overridden."""
        return replace(
            self,
            size=self.size if size is None else size,
            obstacles=self.obstacles if obstacles is None else obstacles,
        )

    def has_obstacle_at(self, pos: Position) -> bool:
        return pos in self.obstacles


def create_planet(
    width: int,
    height: int,
    obstacles: Iterable[Union[Position, Coordinate]] = (),
) -> Planet:
    """Build a planet from raw dimensions and obstacle coordinates.

    Obstacles may be given as :class:`Position` objects or ``(x, y)`` tuples;
    duplicates collapse into one.
    """
    return Planet(
        size=GridSize(width, height),
        obstacles=pset(
            obs if isinstance(obs, Position) else Position(*obs) for obs in obstacles
        ),
    )
