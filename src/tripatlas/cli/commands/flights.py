"""Command flights - flight plan for a year of travel."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from tripatlas.core.exceptions import TripAtlasError
from tripatlas.core.logger import set_verbose
from tripatlas.services.record_loader import RecordLoader
from tripatlas.services.year_planner import YearFlightPlanner

console = Console()


def flights(
    locations_file: Path = typer.Argument(
        ...,
        help="JSON file with visited locations (lat, lng, name, date)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    segments: int = typer.Option(
        100,
        "--segments",
        "-s",
        help="Great-circle steps per flight",
        min=1,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print flight paths (with waypoints) as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log service calls with their parameters",
    ),
) -> None:
    """Connects visited locations into flights in chronological order."""
    set_verbose(verbose)

    try:
        locations = RecordLoader().load_locations(locations_file)
        paths = YearFlightPlanner(segments=segments).plan(locations)
    except TripAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in paths], indent=2, ensure_ascii=False))
        return

    if not paths:
        console.print("[yellow]No flights[/yellow] - at least two locations are needed.")
        return

    table = Table(title=f"Flights ({len(locations)} locations)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Bearing", justify="right")
    table.add_column("Flight time", justify="right", style="green")

    total = 0.0
    for idx, path in enumerate(paths, 1):
        total += path.distance
        table.add_row(
            str(idx),
            str(path.start),
            str(path.end),
            f"{path.distance:,.0f} km",
            f"{path.bearing:.0f}°",
            f"{path.estimated_flight_time:.1f} h",
        )

    console.print(table)
    console.print(f"Total distance: [green]{total:,.0f} km[/green]")
