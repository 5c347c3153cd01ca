from __future__ import annotations

import logging
import time
from typing import Sequence, Tuple

from vacuum_core.domain.errors import StorageFailure
from vacuum_core.domain.models import (
    ORIGIN,
    Command,
    ExecutionGateway,
    PathResult,
    Position,
    SavedExecution,
    UnsavedExecution,
)
from vacuum_core.services import simulator

logger = logging.getLogger(__name__)


def timed_simulation(commands: Sequence[Command], start: Position = ORIGIN) -> Tuple[PathResult, UnsavedExecution]:
    """
    Simulates the commands and builds an unsaved execution record.
    Only the simulation itself is timed.
    """
    started = time.perf_counter()
    path = simulator.simulate(commands, start)
    duration = time.perf_counter() - started

    logger.debug(
        "Simulated %d command(s): %d cell(s) in %.6fs, final position %s",
        len(commands),
        path.visited,
        duration,
        path.final_position,
    )
    return path, UnsavedExecution(commands=len(commands), result=path.visited, duration=duration)


def run_execution(commands: Sequence[Command], start: Position = ORIGIN) -> UnsavedExecution:
    _, unsaved = timed_simulation(commands, start)
    return unsaved


def persist_execution(unsaved: UnsavedExecution, gateway: ExecutionGateway) -> SavedExecution:
    """
    Hands the record to the gateway, which assigns id and timestamp together.
    Storage errors propagate; nothing is retried here.
    """
    saved = gateway.persist(unsaved)
    if not isinstance(saved, SavedExecution):
        raise StorageFailure(f"Gateway returned {type(saved).__name__} instead of a saved execution")
    return saved
