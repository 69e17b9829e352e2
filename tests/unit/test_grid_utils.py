import pytest

from mars_rover.components import Position
from mars_rover.utils.grid import is_blocked_at, is_in_bounds
from tests.test_utils import make_planet


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((0, 0), True),
        ((4, 3), True),
        ((5, 0), False),
        ((0, 4), False),
        ((-1, 0), False),
    ],
)
def test_is_in_bounds(pos: tuple, expected: bool) -> None:
    assert is_in_bounds(make_planet(), Position(*pos)) is expected


def test_is_blocked_at_uses_value_equality() -> None:
    planet = make_planet(obstacles=[(1, 1)])
    assert is_blocked_at(planet, Position(1, 1))
    assert not is_blocked_at(planet, Position(1, 2))
