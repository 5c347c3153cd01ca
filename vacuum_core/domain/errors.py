from __future__ import annotations


class VacuumError(Exception):
    """Base error for the vacuum core."""


class StorageFailure(VacuumError):
    """An execution could not be persisted or read back."""
