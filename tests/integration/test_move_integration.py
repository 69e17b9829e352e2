import logging
from typing import Tuple

import pytest

from mars_rover.commands import Command
from mars_rover.components import Position
from mars_rover.state import CollisionDetected, RoverState
from mars_rover.step import move
from mars_rover.types import Orientation
from tests.test_utils import make_planet, make_rover


@pytest.mark.parametrize("orientation", list(Orientation))
def test_turn_left_then_right_is_identity(orientation: Orientation) -> None:
    planet = make_planet()
    rover = make_rover((2, 1), orientation)
    for first, second in [
        (Command.TURN_LEFT, Command.TURN_RIGHT),
        (Command.TURN_RIGHT, Command.TURN_LEFT),
    ]:
        after_first = move(rover, planet, first)
        assert isinstance(after_first, RoverState)
        assert after_first.position == rover.position
        assert move(after_first, planet, second) == rover


@pytest.mark.parametrize("command", [Command.TURN_LEFT, Command.TURN_RIGHT])
@pytest.mark.parametrize("orientation", list(Orientation))
def test_four_turns_return_to_start(orientation: Orientation, command: Command) -> None:
    planet = make_planet()
    rover = make_rover((1, 1), orientation)
    state = rover
    for _ in range(4):
        result = move(state, planet, command)
        assert isinstance(result, RoverState)
        state = result
    assert state == rover


def test_turn_never_collides() -> None:
    # Surrounded on all four sides
    planet = make_planet(obstacles=[(1, 2), (1, 0), (0, 1), (2, 1)])
    rover = make_rover((1, 1))
    for command in [Command.TURN_LEFT, Command.TURN_RIGHT]:
        assert isinstance(move(rover, planet, command), RoverState)


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize("start", [(0, 0), (4, 3), (2, 1)])
def test_forward_then_backward_cancels(
    orientation: Orientation, start: Tuple[int, int]
) -> None:
    planet = make_planet()
    rover = make_rover(start, orientation)
    forward = move(rover, planet, Command.GO_FORWARD)
    assert isinstance(forward, RoverState)
    assert forward.position != rover.position
    assert move(forward, planet, Command.GO_BACKWARD) == rover


@pytest.mark.parametrize(
    "start, orientation, command, expected",
    [
        ((0, 0), Orientation.NORTH, Command.GO_FORWARD, (0, 1)),
        ((0, 3), Orientation.NORTH, Command.GO_FORWARD, (0, 0)),
        ((0, 0), Orientation.NORTH, Command.GO_BACKWARD, (0, 3)),
        ((0, 3), Orientation.SOUTH, Command.GO_FORWARD, (0, 2)),
        ((0, 0), Orientation.SOUTH, Command.GO_FORWARD, (0, 3)),
        ((0, 3), Orientation.SOUTH, Command.GO_BACKWARD, (0, 0)),
        ((4, 0), Orientation.EAST, Command.GO_FORWARD, (0, 0)),
        ((0, 0), Orientation.EAST, Command.GO_BACKWARD, (4, 0)),
        ((0, 0), Orientation.WEST, Command.GO_FORWARD, (4, 0)),
        ((4, 0), Orientation.WEST, Command.GO_BACKWARD, (0, 0)),
    ],
)
def test_step_wraps_around_edges(
    start: Tuple[int, int],
    orientation: Orientation,
    command: Command,
    expected: Tuple[int, int],
) -> None:
    result = move(make_rover(start, orientation), make_planet(), command)
    assert result == make_rover(expected, orientation)


@pytest.mark.parametrize(
    "orientation, command, obstacle",
    [
        (Orientation.NORTH, Command.GO_FORWARD, (2, 2)),
        (Orientation.NORTH, Command.GO_BACKWARD, (2, 0)),
        (Orientation.SOUTH, Command.GO_FORWARD, (2, 0)),
        (Orientation.EAST, Command.GO_FORWARD, (3, 1)),
        (Orientation.WEST, Command.GO_FORWARD, (1, 1)),
        (Orientation.WEST, Command.GO_BACKWARD, (3, 1)),
    ],
)
def test_obstacle_returns_collision_with_pre_move_state(
    orientation: Orientation, command: Command, obstacle: Tuple[int, int]
) -> None:
    planet = make_planet(obstacles=[obstacle])
    rover = make_rover((2, 1), orientation)
    result = move(rover, planet, command)
    assert result == CollisionDetected(
        obstacle_position=Position(*obstacle), rover_state=rover
    )


def test_obstacle_across_the_wrapped_edge_is_detected() -> None:
    planet = make_planet(obstacles=[(0, 2)])
    rover = make_rover((4, 2), Orientation.EAST)
    result = move(rover, planet, Command.GO_FORWARD)
    assert isinstance(result, CollisionDetected)
    assert result.obstacle_position == Position(0, 2)
    assert result.rover_state is rover


def test_move_does_not_mutate_inputs() -> None:
    planet = make_planet(obstacles=[(1, 1)])
    rover = make_rover((0, 0))
    move(rover, planet, Command.GO_FORWARD)
    assert rover == make_rover((0, 0))
    assert planet == make_planet(obstacles=[(1, 1)])


def test_collision_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    planet = make_planet(obstacles=[(0, 1)])
    with caplog.at_level(logging.INFO, logger="mars_rover.step"):
        move(make_rover(), planet, Command.GO_FORWARD)
    assert "blocked by obstacle at (0, 1)" in caplog.text
