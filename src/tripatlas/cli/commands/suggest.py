"""Command suggest - album suggestions from photo records."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from tripatlas.core.config import SuggestionConfig
from tripatlas.core.exceptions import TripAtlasError
from tripatlas.core.logger import set_verbose
from tripatlas.models.photo import Photo
from tripatlas.services.album_suggester import AlbumSuggestionEngine
from tripatlas.services.photo_scanner import PhotoScanner
from tripatlas.services.record_loader import RecordLoader

console = Console()


def suggest(
    source: Path = typer.Argument(
        ...,
        help="JSON file with photo records, or a folder of JPEG photos",
        exists=True,
        resolve_path=True,
    ),
    existing: Optional[Path] = typer.Option(
        None,
        "--existing",
        "-e",
        help="JSON list of photo IDs that already belong to albums",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    day_gap: float = typer.Option(
        3.0,
        "--day-gap",
        help="Maximum gap between photos of one trip (in days)",
        min=0.0,
    ),
    radius: float = typer.Option(
        50.0,
        "--radius",
        "-r",
        help="Cluster radius (in km)",
        min=0.0,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print suggestions as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log service calls with their parameters",
    ),
) -> None:
    """Suggests albums by grouping photos by date and location.

    Photos within DAY_GAP days of each other form a trip, each trip is split
    into places RADIUS km across, and every place with at least 3 photos
    becomes a suggestion.
    """
    set_verbose(verbose)
    loader = RecordLoader()

    try:
        photos = _load_photos(source, loader)
        engine = AlbumSuggestionEngine(SuggestionConfig(day_gap_threshold=day_gap, cluster_radius_km=radius))
        suggestions = engine.suggest(photos)
        if existing:
            suggestions = engine.filter_existing_albums(suggestions, loader.load_photo_ids(existing))
    except TripAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([s.to_dict() for s in suggestions], indent=2, ensure_ascii=False))
        return

    if not suggestions:
        console.print("[yellow]No suggestions[/yellow] - not enough photos with date and location data.")
        return

    table = Table(title=f"Album suggestions ({len(photos)} photos)")
    table.add_column("Title", style="cyan")
    table.add_column("Photos", justify="right")
    table.add_column("Dates")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Reason")

    for s in suggestions:
        dates = s.start_date[:10] if s.start_date[:10] == s.end_date[:10] else f"{s.start_date[:10]} - {s.end_date[:10]}"
        table.add_row(s.suggested_title, str(len(s.photos)), dates, str(s.confidence_score), s.reason)

    console.print(table)


def _load_photos(source: Path, loader: RecordLoader) -> List[Photo]:
    if source.is_dir():
        return PhotoScanner().scan(source)
    return loader.load_photos(source)
