"""Configuration for Tripatlas."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestionConfig:
    """Thresholds for grouping photos into album suggestions."""

    # Maximum gap between consecutive photos of one trip (in days)
    day_gap_threshold: float = 3.0

    # Radius for spatial clustering (in km)
    cluster_radius_km: float = 50.0

    # Smallest group that can become a suggestion
    min_photos: int = 3


@dataclass(frozen=True)
class FlightConfig:
    """Constants for flight path geometry and animation pacing."""

    # Number of great-circle steps between start and end
    segments: int = 100

    # Frames per second of the generated animation
    frame_rate: int = 60

    # Average commercial cruise speed (km/h), used for the illustrative flight time
    cruise_speed_kmh: float = 900.0

    # Animation duration bounds (ms) and pacing (ms per km)
    min_duration_ms: float = 3000.0
    max_duration_ms: float = 8000.0
    ms_per_km: float = 50.0

    # Cruise altitude in globe units, reduced for short-haul flights
    cruise_altitude: float = 0.02
    short_haul_km: float = 500.0
    short_haul_factor: float = 0.6

    # Following camera
    camera_trail: float = 0.05
    camera_height: float = 0.5
