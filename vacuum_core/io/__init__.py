from vacuum_core.io.commands import load_commands_csv  # noqa: F401
from vacuum_core.io.request import load_path_request, path_request_from_dict  # noqa: F401
from vacuum_core.io.store import MemoryExecutionStore  # noqa: F401

__all__ = ["load_commands_csv", "load_path_request", "path_request_from_dict", "MemoryExecutionStore"]
