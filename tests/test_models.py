import datetime as dt

import pytest

from vacuum_core.domain.models import (
    FIELD_LIMIT,
    Command,
    Direction,
    Position,
    SavedExecution,
    UnsavedExecution,
    clamp,
)


def test_clamp_keeps_in_range_values_and_pins_the_rest():
    assert clamp(0) == 0
    assert clamp(FIELD_LIMIT) == FIELD_LIMIT
    assert clamp(-FIELD_LIMIT) == -FIELD_LIMIT
    assert clamp(FIELD_LIMIT + 1) == FIELD_LIMIT
    assert clamp(-FIELD_LIMIT - 250) == -FIELD_LIMIT
    assert clamp(7, bound=5) == 5


def test_direction_deltas_and_parsing():
    assert Direction.NORTH.delta == (0, 1)
    assert Direction.SOUTH.delta == (0, -1)
    assert Direction.EAST.delta == (1, 0)
    assert Direction.WEST.delta == (-1, 0)
    assert Direction.parse(" East ") is Direction.EAST
    with pytest.raises(ValueError):
        Direction.parse("northeast")


def test_shift_respects_boundary():
    assert Position(1, 1).shift(Direction.NORTH) == Position(1, 2)
    assert Position(0, 0).shift(Direction.WEST) == Position(-1, 0)
    assert Position(FIELD_LIMIT, 1).shift(Direction.EAST) == Position(FIELD_LIMIT, 1)
    assert Position(-FIELD_LIMIT, 1).shift(Direction.WEST) == Position(-FIELD_LIMIT, 1)


def test_move_returns_every_cell_including_start():
    end, cells = Position(0, 0).move(Direction.EAST, 3)
    assert end == Position(3, 0)
    assert cells == (Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0))


def test_move_zero_distance_is_noop():
    start = Position(5, -5)
    assert start.move(Direction.SOUTH, 0) == (start, (start,))


def test_move_stops_at_boundary_and_repeats_pinned_cell():
    end, cells = Position(FIELD_LIMIT - 1, 0).move(Direction.EAST, 3)
    pinned = Position(FIELD_LIMIT, 0)
    assert end == pinned
    assert cells == (Position(FIELD_LIMIT - 1, 0), pinned, pinned, pinned)


def test_move_rejects_negative_distance():
    with pytest.raises(ValueError):
        Position(0, 0).move(Direction.NORTH, -1)


def test_command_steps_must_be_non_negative():
    assert Command(Direction.NORTH, 0).steps == 0
    with pytest.raises(ValueError):
        Command(Direction.NORTH, -3)


def test_positions_hash_by_value():
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_saved_execution_is_built_from_unsaved():
    unsaved = UnsavedExecution(commands=3, result=10, duration=0.000023)
    ts = dt.datetime(2014, 11, 28, 12, 0, 9, tzinfo=dt.timezone.utc)
    saved = SavedExecution.from_unsaved(unsaved, id=1, timestamp=ts)

    assert (saved.id, saved.timestamp) == (1, ts)
    assert (saved.commands, saved.result, saved.duration) == (3, 10, 0.000023)
    assert not hasattr(unsaved, "id")
    assert not hasattr(unsaved, "timestamp")


def test_saved_execution_requires_positive_id_and_aware_timestamp():
    unsaved = UnsavedExecution(commands=1, result=2, duration=0.1)
    with pytest.raises(ValueError):
        SavedExecution.from_unsaved(unsaved, id=0, timestamp=dt.datetime.now(dt.timezone.utc))
    with pytest.raises(ValueError):
        SavedExecution.from_unsaved(unsaved, id=1, timestamp=dt.datetime(2020, 1, 1))


@pytest.mark.parametrize(
    "x,y",
    [(FIELD_LIMIT + 1, 0), (0, -FIELD_LIMIT - 1), (-200000, 0)],
)
def test_position_outside_the_grid_cannot_exist(x, y):
    with pytest.raises(ValueError):
        Position(x, y)


def test_position_on_the_edge_is_allowed():
    corner = Position(-FIELD_LIMIT, FIELD_LIMIT)
    assert corner.shift(Direction.WEST) == corner
    assert corner.shift(Direction.EAST) == Position(-FIELD_LIMIT + 1, FIELD_LIMIT)
