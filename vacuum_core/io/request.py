from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from vacuum_core.domain.models import ORIGIN, Command, Direction, PathRequest, Position


def load_path_request(path: str | Path) -> PathRequest:
    data = _read_json(path)
    return path_request_from_dict(data)


def path_request_from_dict(data: Dict[str, Any]) -> PathRequest:
    """Builds a request from the same JSON shape the HTTP endpoint accepts."""
    if not isinstance(data, dict):
        raise ValueError("Request must be a JSON object")
    raw_commands = data.get("commands")
    if not isinstance(raw_commands, list):
        raise ValueError("Request needs a 'commands' list")

    commands = tuple(_command(item) for item in raw_commands)
    return PathRequest(commands=commands, start=_position(data.get("start")))


def _command(item: Any) -> Command:
    if not isinstance(item, dict) or "direction" not in item or "steps" not in item:
        raise ValueError(f"Command needs 'direction' and 'steps': {item!r}")
    return Command(direction=Direction.parse(item["direction"]), steps=_integer(item["steps"], "steps"))


def _position(raw: Optional[Dict[str, Any]]) -> Position:
    if raw is None:
        return ORIGIN
    if not isinstance(raw, dict) or "x" not in raw or "y" not in raw:
        raise ValueError(f"Start needs 'x' and 'y': {raw!r}")
    return Position(x=_integer(raw["x"], "x"), y=_integer(raw["y"], "y"))


def _integer(value: Any, field: str) -> int:
    # same acceptance as the REST IntegerField: ints, integral floats, digit strings
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{field} must be an integer, got {value!r}")


def _read_json(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
