from __future__ import annotations

import datetime as dt
import itertools
import threading
from typing import Dict, Optional

from vacuum_core.domain.models import SavedExecution, UnsavedExecution


class MemoryExecutionStore:
    """
    Process-local execution gateway. Id and timestamp are assigned under one lock.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._rows: Dict[int, SavedExecution] = {}
        self._lock = threading.Lock()

    def persist(self, unsaved: UnsavedExecution) -> SavedExecution:
        with self._lock:
            saved = SavedExecution.from_unsaved(
                unsaved,
                id=next(self._ids),
                timestamp=dt.datetime.now(dt.timezone.utc),
            )
            self._rows[saved.id] = saved
        return saved

    def get(self, execution_id: int) -> Optional[SavedExecution]:
        with self._lock:
            return self._rows.get(execution_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
