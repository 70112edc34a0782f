"""CLI interface."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from tacboard.interpolation import frame_at, playback_position
from tacboard.models.document import BoardDocument
from tacboard.models.elements import Orientation
from tacboard.orientation import change_orientation, document_orientation
from tacboard.serialization import create_document
from tacboard.timeline import get_total_duration
from tacboard.tools.file_storage import load_document, save_document
from tacboard.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output.")):
    """Tactical board documents: create, inspect, flip and play back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_or_exit(path: str) -> BoardDocument:
    document = load_document(path)
    if document is None:
        typer.echo(f"Could not load board document: {path}", err=True)
        raise typer.Exit(code=1)
    return document


@app.command()
def new(
    name: str = typer.Argument(..., help="Board name."),
    output_dir: Optional[str] = typer.Option(None, "--output-dir", "-o", help="Directory for the .tmc.json file."),
):
    """Create a board with both starting lineups."""
    if not name.strip():
        raise typer.BadParameter("Board name must not be empty")
    document = create_document(name, settings.pitch_config(), settings.team_settings(), settings.default_step_duration)
    if settings.default_orientation is not Orientation.LANDSCAPE:
        document = change_orientation(document, settings.default_orientation)
    typer.echo(save_document(document, output_dir or settings.output_dir))


@app.command()
def info(path: str = typer.Argument(..., help="Board document path.")):
    """Print a summary of a board document."""
    document = _load_or_exit(path)
    summary = {
        "name": document.name,
        "version": document.version,
        "orientation": document_orientation(document).value,
        "steps": [{"id": s.id, "name": s.name, "elements": len(s.elements), "duration": s.duration} for s in document.steps],
        "totalDuration": get_total_duration(document.steps),
    }
    typer.echo(json.dumps(summary, indent=2))


@app.command()
def flip(
    path: str = typer.Argument(..., help="Board document path."),
    to: Orientation = typer.Option(..., "--to", help="Target orientation."),
):
    """Rotate every step of a board to the target orientation."""
    document = _load_or_exit(path)
    turned = change_orientation(document, to)
    p = Path(path)
    typer.echo(save_document(turned, str(p.parent), filename=p.name))


@app.command()
def frame(
    path: str = typer.Argument(..., help="Board document path."),
    elapsed_ms: float = typer.Option(0.0, "--elapsed-ms", "-t", help="Playback clock in milliseconds."),
    loop: bool = typer.Option(False, "--loop", help="Wrap around after the last step."),
):
    """Print the interpolated elements shown at a playback time."""
    document = _load_or_exit(path)
    position = playback_position(document.steps, elapsed_ms, loop)
    elements = frame_at(document.steps, elapsed_ms, loop)
    typer.echo(json.dumps({
        "stepIndex": position.step_index,
        "progress": position.progress01,
        "finished": position.finished,
        "elements": [el.model_dump(mode="json", by_alias=True, exclude_none=True) for el in elements],
    }, indent=2))


@app.command()
def migrate(path: str = typer.Argument(..., help="Board document path.")):
    """Upgrade a board document to the current version in place."""
    document = _load_or_exit(path)
    p = Path(path)
    typer.echo(save_document(document, str(p.parent), filename=p.name))


if __name__ == "__main__":
    app()
