import pytest

from mars_rover.commands import Command
from mars_rover.components import Position
from mars_rover.ref import RoverStateRef, move_ref, process_batch_ref
from mars_rover.state import CollisionDetected
from mars_rover.step import process_batch
from mars_rover.types import Orientation
from tests.test_utils import make_planet, make_rover


def test_ref_get_set_update() -> None:
    ref = RoverStateRef(make_rover())
    assert ref.get() == make_rover()
    ref.set(make_rover((1, 1)))
    assert ref.get() == make_rover((1, 1))
    updated = ref.update(lambda s: s.clone(orientation=Orientation.WEST))
    assert updated == ref.get() == make_rover((1, 1), Orientation.WEST)


def test_move_ref_updates_cell_on_success() -> None:
    ref = RoverStateRef(make_rover())
    assert move_ref(ref, make_planet(), Command.GO_FORWARD) is None
    assert ref.get() == make_rover((0, 1))


def test_move_ref_leaves_cell_on_collision() -> None:
    ref = RoverStateRef(make_rover())
    collision = move_ref(ref, make_planet(obstacles=[(0, 1)]), Command.GO_FORWARD)
    assert collision == CollisionDetected(Position(0, 1), make_rover())
    assert ref.get() == make_rover()


@pytest.mark.parametrize(
    "turn_command, expected",
    [
        (Command.TURN_LEFT, Orientation.WEST),
        (Command.TURN_RIGHT, Orientation.EAST),
    ],
)
def test_move_ref_turns(turn_command: Command, expected: Orientation) -> None:
    ref = RoverStateRef(make_rover())
    assert move_ref(ref, make_planet(), turn_command) is None
    assert ref.get().orientation == expected


def test_process_batch_ref_stops_at_collision() -> None:
    planet = make_planet(obstacles=[(0, 2)])
    ref = RoverStateRef(make_rover())
    collision = process_batch_ref(
        ref, planet, [Command.GO_FORWARD, Command.GO_FORWARD, Command.TURN_RIGHT]
    )
    assert collision == CollisionDetected(Position(0, 2), make_rover((0, 1)))
    # Trailing TURN_RIGHT was never applied
    assert ref.get() == make_rover((0, 1), Orientation.NORTH)


def test_process_batch_ref_matches_pure_batch() -> None:
    planet = make_planet(obstacles=[(0, 2)])
    rover = make_rover((1, 1), Orientation.EAST)
    ref = RoverStateRef(rover)
    assert process_batch_ref(ref, planet, "FFLBBRF") is None
    assert ref.get() == process_batch(rover, planet, "FFLBBRF")


def test_process_batch_ref_rejects_empty_batch() -> None:
    ref = RoverStateRef(make_rover())
    with pytest.raises(ValueError):
        process_batch_ref(ref, make_planet(), [])
