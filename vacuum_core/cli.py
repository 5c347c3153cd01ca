from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from vacuum_core.domain.models import PathRequest, Position
from vacuum_core.io import commands as commands_io
from vacuum_core.io import request as request_io
from vacuum_core.services import execution as execution_service
from vacuum_core.services import report
from vacuum_core.services import simulator

app = typer.Typer(help="Robot vacuum path CLI: replay movement commands and count cleaned cells.")


def _save_json(path: Path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def _load_request(
    request: Optional[Path],
    commands_csv: Optional[Path],
    start_x: Optional[int],
    start_y: Optional[int],
) -> PathRequest:
    try:
        if request:
            loaded = request_io.load_path_request(request)
        elif commands_csv:
            loaded = PathRequest(commands=tuple(commands_io.load_commands_csv(commands_csv)))
        else:
            raise typer.BadParameter("Provide either --request or --commands-csv")
    except (FileNotFoundError, KeyError, TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    if start_x is None and start_y is None:
        return loaded

    # explicit start options override the file
    base = loaded.start
    try:
        start = Position(
            x=start_x if start_x is not None else base.x,
            y=start_y if start_y is not None else base.y,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return PathRequest(commands=loaded.commands, start=start)


@app.command()
def simulate(
    request: Optional[Path] = typer.Option(None, help="JSON request with commands and optional start"),
    commands_csv: Optional[Path] = typer.Option(None, help="CSV with direction,steps columns"),
    start_x: Optional[int] = typer.Option(None, help="Override start x"),
    start_y: Optional[int] = typer.Option(None, help="Override start y"),
    out: Optional[Path] = typer.Option(None, help="Output path for the result JSON"),
):
    """Replay commands and report distinct cells cleaned (not persisted)."""
    path_request = _load_request(request, commands_csv, start_x, start_y)
    path, unsaved = execution_service.timed_simulation(path_request.commands, path_request.start)
    payload = report.unsaved_to_json(unsaved, path)
    if out:
        _save_json(out, payload)
        typer.echo(f"Result written to {out}")
    else:
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def trace(
    request: Optional[Path] = typer.Option(None, help="JSON request with commands and optional start"),
    commands_csv: Optional[Path] = typer.Option(None, help="CSV with direction,steps columns"),
    start_x: Optional[int] = typer.Option(None, help="Override start x"),
    start_y: Optional[int] = typer.Option(None, help="Override start y"),
):
    """Show position and running cell count after every command."""
    path_request = _load_request(request, commands_csv, start_x, start_y)
    console = Console()

    table = Table(title=f"Path from ({path_request.start.x}, {path_request.start.y})")
    table.add_column("#", justify="right")
    table.add_column("Direction")
    table.add_column("Steps", justify="right")
    table.add_column("Position")
    table.add_column("Cells", justify="right")

    visited = 1
    for progress in simulator.iter_simulation(path_request.commands, path_request.start):
        visited = progress.visited
        table.add_row(
            str(progress.index + 1),
            progress.command.direction.value,
            str(progress.command.steps),
            f"({progress.position.x}, {progress.position.y})",
            str(progress.visited),
        )

    console.print(table)
    console.print(f"Commands: [bold]{len(path_request.commands)}[/bold] | Cells cleaned: [bold green]{visited}[/bold green]")


if __name__ == "__main__":
    app()
