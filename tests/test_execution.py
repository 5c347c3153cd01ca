import datetime as dt
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from vacuum_core.domain.errors import StorageFailure
from vacuum_core.domain.models import Command, Direction, Position, SavedExecution, UnsavedExecution
from vacuum_core.io.store import MemoryExecutionStore
from vacuum_core.services import execution as execution_service
from vacuum_core.services.report import parse_timezone, render_execution


class _BrokenGateway:
    def persist(self, unsaved):
        raise StorageFailure("connection refused")

    def get(self, execution_id):
        return None


class _LeakyGateway:
    def persist(self, unsaved):
        return unsaved

    def get(self, execution_id):
        return None


def test_run_execution_counts_commands_and_cells():
    commands = [Command(Direction.NORTH, 10), Command(Direction.SOUTH, 10)]
    unsaved = execution_service.run_execution(commands)
    assert isinstance(unsaved, UnsavedExecution)
    assert unsaved.commands == 2
    assert unsaved.result == 11
    assert unsaved.duration >= 0.0


def test_run_execution_counts_noop_and_clamped_commands():
    commands = [Command(Direction.EAST, 0), Command(Direction.EAST, 5), Command(Direction.EAST, 0)]
    unsaved = execution_service.run_execution(commands, start=Position(100000, 0))
    assert unsaved.commands == 3
    assert unsaved.result == 1


def test_empty_execution():
    unsaved = execution_service.run_execution([])
    assert (unsaved.commands, unsaved.result) == (0, 1)


def test_timed_simulation_returns_path_and_record():
    path, unsaved = execution_service.timed_simulation([Command(Direction.EAST, 200000)])
    assert path.final_position == Position(100000, 0)
    assert unsaved.result == path.visited == 100001


def test_persist_round_trip_keeps_values():
    store = MemoryExecutionStore()
    unsaved = UnsavedExecution(commands=2, result=11, duration=0.000123)

    saved = execution_service.persist_execution(unsaved, store)

    assert saved.id == 1
    assert saved.timestamp.tzinfo is not None
    assert (saved.commands, saved.result, saved.duration) == (2, 11, 0.000123)
    assert store.get(saved.id) == saved
    assert store.get(99) is None


def test_ids_are_unique_under_concurrency():
    store = MemoryExecutionStore()
    unsaved = UnsavedExecution(commands=1, result=2, duration=0.0)

    with ThreadPoolExecutor(max_workers=8) as pool:
        saved = list(pool.map(lambda _: execution_service.persist_execution(unsaved, store), range(200)))

    assert sorted(s.id for s in saved) == list(range(1, 201))
    assert len(store) == 200


def test_storage_failure_propagates():
    with pytest.raises(StorageFailure):
        execution_service.persist_execution(UnsavedExecution(1, 2, 0.1), _BrokenGateway())


def test_gateway_must_return_saved_record():
    with pytest.raises(StorageFailure):
        execution_service.persist_execution(UnsavedExecution(1, 2, 0.1), _LeakyGateway())


def test_render_execution_localizes_timestamp_and_formats_duration():
    saved = SavedExecution(
        id=1,
        timestamp=dt.datetime(2014, 11, 28, 12, 0, 9, 1, tzinfo=dt.timezone.utc),
        commands=3,
        result=10,
        duration=0.000023,
    )
    payload = render_execution(saved, parse_timezone("+01:00"))
    assert payload == {
        "id": 1,
        "timestamp": "2014-11-28T13:00:09.000001+01:00",
        "commands": 3,
        "result": 10,
        "duration": "0.000023",
    }


def test_render_duration_always_has_six_decimals():
    saved = SavedExecution(
        id=4,
        timestamp=dt.datetime(2022, 12, 13, 17, 52, 25, tzinfo=dt.timezone.utc),
        commands=0,
        result=1,
        duration=1.5,
    )
    payload = render_execution(saved, dt.timezone.utc)
    assert payload["duration"] == "1.500000"
    assert re.match(r"^2022-12-13T17:52:25\.000000\+00:00$", payload["timestamp"])


def test_render_rejects_unsaved():
    with pytest.raises(TypeError):
        render_execution(UnsavedExecution(1, 2, 0.1), dt.timezone.utc)


@pytest.mark.parametrize(
    "name,offset",
    [
        ("UTC", dt.timedelta(0)),
        ("+01:00", dt.timedelta(hours=1)),
        ("-0530", dt.timedelta(hours=-5, minutes=-30)),
    ],
)
def test_parse_fixed_timezones(name, offset):
    tz = parse_timezone(name)
    assert tz.utcoffset(dt.datetime(2020, 1, 1)) == offset


def test_parse_iana_timezone():
    tz = parse_timezone("Europe/Berlin")
    winter = dt.datetime(2014, 11, 28, 12, tzinfo=dt.timezone.utc).astimezone(tz)
    assert winter.utcoffset() == dt.timedelta(hours=1)


def test_parse_unknown_timezone():
    with pytest.raises(ValueError):
        parse_timezone("Mars/Olympus_Mons")
