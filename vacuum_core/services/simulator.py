from __future__ import annotations

from typing import Iterable, Iterator, Set

from vacuum_core.domain.models import ORIGIN, Command, CommandProgress, PathResult, Position


def iter_simulation(commands: Iterable[Command], start: Position = ORIGIN) -> Iterator[CommandProgress]:
    """
    Replays commands in order from `start`, yielding progress after each one.
    The start cell always counts as visited.
    """
    position = start
    visited: Set[Position] = {start}

    for index, command in enumerate(commands):
        for cell in position.walk(command.direction, command.steps):
            visited.add(cell)
            position = cell
        yield CommandProgress(index=index, command=command, position=position, visited=len(visited))


def simulate(commands: Iterable[Command], start: Position = ORIGIN) -> PathResult:
    """Count the distinct cells covered by a command sequence."""
    position = start
    visited = 1
    for progress in iter_simulation(commands, start):
        position = progress.position
        visited = progress.visited
    return PathResult(visited=visited, final_position=position)
