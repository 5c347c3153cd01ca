from __future__ import annotations

import dataclasses
import datetime as dt
import enum
from typing import Iterator, Optional, Protocol, Tuple, Union

# Grid limit in any direction, inclusive.
FIELD_LIMIT = 100000


def clamp(coordinate: int, bound: int = FIELD_LIMIT) -> int:
    if coordinate > bound:
        return bound
    if coordinate < -bound:
        return -bound
    return coordinate


class Direction(enum.Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @classmethod
    def parse(cls, token: str) -> "Direction":
        try:
            return cls(str(token).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {token!r}") from None


_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclasses.dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __post_init__(self):
        if clamp(self.x) != self.x or clamp(self.y) != self.y:
            raise ValueError(f"Position out of bounds: ({self.x}, {self.y})")

    def shift(self, direction: Direction) -> "Position":
        """One unit step, clamped against the grid boundary."""
        dx, dy = direction.delta
        return Position(clamp(self.x + dx), clamp(self.y + dy))

    def walk(self, direction: Direction, distance: int) -> Iterator["Position"]:
        """
        Yields the starting cell, then the cell occupied after each unit step.
        A step against a boundary already reached yields the same cell again.
        """
        if distance < 0:
            raise ValueError("distance must be non-negative")
        current = self
        yield current
        for _ in range(distance):
            current = current.shift(direction)
            yield current

    def move(self, direction: Direction, distance: int) -> Tuple["Position", Tuple["Position", ...]]:
        """Returns the end position and every cell covered. `walk` is the lazy form the simulator uses."""
        cells = tuple(self.walk(direction, distance))
        return cells[-1], cells


ORIGIN = Position(0, 0)


@dataclasses.dataclass(frozen=True)
class Command:
    direction: Direction
    steps: int

    def __post_init__(self):
        if self.steps < 0:
            raise ValueError("steps must be non-negative")


@dataclasses.dataclass(frozen=True)
class PathRequest:
    commands: Tuple[Command, ...]
    start: Position = ORIGIN


@dataclasses.dataclass(frozen=True)
class PathResult:
    visited: int
    final_position: Position


@dataclasses.dataclass(frozen=True)
class CommandProgress:
    index: int
    command: Command
    position: Position
    visited: int


@dataclasses.dataclass(frozen=True)
class UnsavedExecution:
    commands: int
    result: int
    duration: float


@dataclasses.dataclass(frozen=True)
class SavedExecution:
    id: int
    timestamp: dt.datetime
    commands: int
    result: int
    duration: float

    def __post_init__(self):
        if self.id <= 0:
            raise ValueError("id must be a positive integer")
        if self.timestamp.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")

    @classmethod
    def from_unsaved(cls, unsaved: UnsavedExecution, *, id: int, timestamp: dt.datetime) -> "SavedExecution":
        return cls(
            id=id,
            timestamp=timestamp,
            commands=unsaved.commands,
            result=unsaved.result,
            duration=unsaved.duration,
        )


Execution = Union[UnsavedExecution, SavedExecution]


class ExecutionGateway(Protocol):
    def persist(self, unsaved: UnsavedExecution) -> SavedExecution:
        ...

    def get(self, execution_id: int) -> Optional[SavedExecution]:
        ...
