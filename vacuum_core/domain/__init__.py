from vacuum_core.domain.errors import StorageFailure, VacuumError  # noqa: F401
from vacuum_core.domain.models import (  # noqa: F401
    FIELD_LIMIT,
    ORIGIN,
    Command,
    CommandProgress,
    Direction,
    Execution,
    ExecutionGateway,
    PathRequest,
    PathResult,
    Position,
    SavedExecution,
    UnsavedExecution,
    clamp,
)

__all__ = [
    "FIELD_LIMIT",
    "ORIGIN",
    "Command",
    "CommandProgress",
    "Direction",
    "Execution",
    "ExecutionGateway",
    "PathRequest",
    "PathResult",
    "Position",
    "SavedExecution",
    "StorageFailure",
    "UnsavedExecution",
    "VacuumError",
    "clamp",
]
