"""Command animate - animation frames of a single flight."""

import json
from dataclasses import asdict

import typer
from rich.console import Console
from rich.table import Table

from tripatlas.core.exceptions import TripAtlasError
from tripatlas.core.logger import set_verbose
from tripatlas.models.location import GeoPoint
from tripatlas.services.flight_path import FlightPathCalculator, rotations

console = Console()


def animate(
    start_lat: float = typer.Argument(..., help="Departure latitude", min=-90, max=90),
    start_lng: float = typer.Argument(..., help="Departure longitude", min=-180, max=180),
    end_lat: float = typer.Argument(..., help="Arrival latitude", min=-90, max=90),
    end_lng: float = typer.Argument(..., help="Arrival longitude", min=-180, max=180),
    frame_rate: int = typer.Option(
        60,
        "--frame-rate",
        "-f",
        help="Frames per second",
        min=1,
        max=240,
    ),
    segments: int = typer.Option(
        100,
        "--segments",
        "-s",
        help="Great-circle steps",
        min=1,
    ),
    every: int = typer.Option(
        30,
        "--every",
        help="Show every N-th frame in the table",
        min=1,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print all frames with rotation and camera as JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log service calls with their parameters",
    ),
) -> None:
    """Samples the flight between two points into animation frames.

    Put -- before negative coordinates: tripatlas animate -- -33.95 151.18 51.47 -0.45
    """
    set_verbose(verbose)

    try:
        path = FlightPathCalculator.generate_flight_path(
            GeoPoint(start_lat, start_lng), GeoPoint(end_lat, end_lng), segments
        )
        frames = rotations(FlightPathCalculator.generate_flight_segments(path, frame_rate))
    except TripAtlasError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        data = {
            "flight": {k: v for k, v in path.to_dict().items() if k != "waypoints"},
            "frames": [
                {
                    **segment.to_dict(),
                    "rotation": asdict(rotation),
                    "camera": asdict(FlightPathCalculator.calculate_camera_position(segment)),
                }
                for segment, rotation in frames
            ],
        }
        typer.echo(json.dumps(data, indent=2))
        return

    console.print(f"[blue]Flight[/blue] {path.start} → {path.end}")
    console.print(f"  Distance: {path.distance:,.1f} km, bearing {path.bearing:.1f}°")
    console.print(f"  Flight time: {path.estimated_flight_time:.1f} h, animation {path.duration / 1000:.2f} s")
    console.print(f"  Frames: {len(frames)} at {frame_rate} fps")
    console.print()

    table = Table()
    for column in ("Time", "Progress", "Lat", "Lng", "Altitude", "Heading", "Pitch", "Roll"):
        table.add_column(column, justify="right")

    for idx, (segment, rotation) in enumerate(frames):
        if idx % every and idx != len(frames) - 1:
            continue
        table.add_row(
            f"{segment.timestamp / 1000:.2f} s",
            f"{segment.progress:.0%}",
            f"{segment.lat:.4f}",
            f"{segment.lng:.4f}",
            f"{segment.altitude:.4f}",
            f"{segment.heading:.1f}°",
            f"{rotation.pitch:.1f}°",
            f"{rotation.roll:.1f}°",
        )

    console.print(table)
