from __future__ import annotations

import datetime as dt
import re
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from vacuum_core.domain.models import PathResult, SavedExecution, UnsavedExecution

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def parse_timezone(name: str) -> dt.tzinfo:
    """
    Accepts "UTC", a fixed offset such as "+01:00" / "-0530", or an IANA zone name.
    """
    txt = name.strip()
    if txt.upper() in ("UTC", "Z"):
        return dt.timezone.utc
    match = _OFFSET_RE.match(txt)
    if match:
        sign, hours, minutes = match.groups()
        offset = dt.timedelta(hours=int(hours), minutes=int(minutes))
        return dt.timezone(-offset if sign == "-" else offset)
    try:
        return ZoneInfo(txt)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone: {name!r}") from exc


def format_duration(seconds: float) -> str:
    return f"{seconds:.6f}"


def format_timestamp(timestamp: dt.datetime, tz: dt.tzinfo) -> str:
    return timestamp.astimezone(tz).isoformat(timespec="microseconds")


def render_execution(execution: SavedExecution, tz: dt.tzinfo) -> Dict[str, Any]:
    if not isinstance(execution, SavedExecution):
        raise TypeError("Only saved executions can be rendered")
    return {
        "id": execution.id,
        "timestamp": format_timestamp(execution.timestamp, tz),
        "commands": execution.commands,
        "result": execution.result,
        "duration": format_duration(execution.duration),
    }


def unsaved_to_json(execution: UnsavedExecution, path: PathResult) -> Dict[str, Any]:
    return {
        "commands": execution.commands,
        "result": execution.result,
        "duration": format_duration(execution.duration),
        "final_position": {"x": path.final_position.x, "y": path.final_position.y},
    }
