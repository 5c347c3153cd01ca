from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from vacuum_core.domain.models import Command, Direction


REQUIRED_COLUMNS = {"direction", "steps"}


def load_commands_csv(csv_path: str | Path) -> List[Command]:
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(path)

    df = pd.read_csv(path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns in commands CSV: {missing}")
    if df["steps"].isna().any():
        raise ValueError("Commands CSV has rows without steps")
    if not pd.api.types.is_integer_dtype(df["steps"]):
        raise ValueError(f"Commands CSV steps must be integers, got dtype {df['steps'].dtype}")

    commands: List[Command] = []
    for _, row in df.iterrows():
        commands.append(
            Command(
                direction=Direction.parse(row["direction"]),
                steps=int(row["steps"]),
            )
        )
    return commands
