from __future__ import annotations

import logging
from typing import Optional

from django.db import DatabaseError, transaction

from vacuum_core.domain.errors import StorageFailure
from vacuum_core.domain.models import SavedExecution, UnsavedExecution

from .models import Execution

logger = logging.getLogger(__name__)


class DjangoExecutionGateway:
    """Persists executions through the Django ORM, one INSERT per record."""

    def __init__(self, using: str = "default"):
        self.using = using

    def persist(self, unsaved: UnsavedExecution) -> SavedExecution:
        try:
            with transaction.atomic(using=self.using):
                row = Execution.objects.using(self.using).create(
                    commands=unsaved.commands,
                    result=unsaved.result,
                    duration=unsaved.duration,
                )
        except DatabaseError as exc:
            raise StorageFailure(f"Could not persist execution: {exc}") from exc

        logger.info("Stored execution %s (commands=%d, result=%d)", row.id, row.commands, row.result)
        return row.to_saved()

    def get(self, execution_id: int) -> Optional[SavedExecution]:
        try:
            row = Execution.objects.using(self.using).filter(pk=execution_id).first()
        except DatabaseError as exc:
            raise StorageFailure(f"Could not read execution {execution_id}: {exc}") from exc
        return row.to_saved() if row is not None else None
