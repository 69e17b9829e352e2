"""Planet authoring helpers: text maps, random generation, numeric grids."""

from .convert import planet_to_array
from .generator import generate_planet
from .text import planet_from_ascii, render_ascii

__all__ = [
    "generate_planet",
    "planet_from_ascii",
    "planet_to_array",
    "render_ascii",
]
