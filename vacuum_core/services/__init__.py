from vacuum_core.services.execution import persist_execution, run_execution, timed_simulation  # noqa: F401
from vacuum_core.services.report import parse_timezone, render_execution  # noqa: F401
from vacuum_core.services.simulator import iter_simulation, simulate  # noqa: F401

__all__ = [
    "iter_simulation",
    "simulate",
    "run_execution",
    "timed_simulation",
    "persist_execution",
    "render_execution",
    "parse_timezone",
]
