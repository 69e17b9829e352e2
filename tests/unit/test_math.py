import numpy as np
import pytest

from mars_rover.utils.math import add, modulus, sub, wrap_grid_position


@pytest.mark.parametrize(
    "dividend, divisor, expected",
    [
        (7, 5, 2),
        (-1, 5, 4),
        (0, 5, 0),
        (5, 5, 0),
        (-5, 5, 0),
        (-6, 5, 4),
        (123, 1, 0),
    ],
)
def test_modulus_is_non_negative(dividend: int, divisor: int, expected: int) -> None:
    assert modulus(dividend, divisor) == expected


@pytest.mark.parametrize("divisor", [0, -3])
def test_modulus_rejects_non_positive_divisor(divisor: int) -> None:
    with pytest.raises(ValueError):
        modulus(1, divisor)


@pytest.mark.parametrize("bad", [1.5, "1", True, None])
def test_integer_ops_reject_non_int(bad: object) -> None:
    with pytest.raises(TypeError):
        add(bad, 1)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        sub(1, bad)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        modulus(bad, 5)  # type: ignore[arg-type]


def test_add_and_sub() -> None:
    assert add(2, 3) == 5
    assert sub(2, 3) == -1


@pytest.mark.parametrize(
    "value, bound, expected",
    [
        # valid positions unchanged
        (0, 5, 0),
        (3, 5, 3),
        (4, 5, 4),
        # at boundary
        (5, 5, 0),
        (10, 5, 0),
        # beyond boundary
        (6, 5, 1),
        (9, 5, 4),
        # negative
        (-1, 5, 4),
        (-5, 5, 0),
        (-6, 5, 4),
        # y axis, height 4
        (4, 4, 0),
        (7, 4, 3),
        (-1, 4, 3),
        (-5, 4, 3),
    ],
)
def test_wrap_grid_position(value: int, bound: int, expected: int) -> None:
    assert wrap_grid_position(value, bound) == expected


@pytest.mark.parametrize("bound", [1, 4, 5, 7])
def test_wrap_invariant_over_range(bound: int) -> None:
    for value in range(-3 * bound, 3 * bound):
        wrapped = wrap_grid_position(value, bound)
        assert 0 <= wrapped < bound
        assert wrapped == wrap_grid_position(value + bound, bound)
        assert wrapped == wrap_grid_position(value - bound, bound)


def test_numpy_integers_are_accepted() -> None:
    result = wrap_grid_position(np.int64(-1), np.int64(5))
    assert result == 4
    assert type(result) is int
    assert add(np.int32(2), 3) == 5
