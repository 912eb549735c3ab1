"""Models for flight paths and animation frames."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from tripatlas.models.location import GeoPoint


@dataclass(frozen=True)
class Waypoint:
    """Point along a great-circle route."""

    lat: float
    lng: float


@dataclass(frozen=True)
class FlightPath:
    """Great-circle flight between two points."""

    start: GeoPoint
    end: GeoPoint
    distance: float  # km
    duration: float  # animation duration in ms
    waypoints: Tuple[Waypoint, ...]
    bearing: float  # initial bearing in degrees
    estimated_flight_time: float  # real-world flight time in hours

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "distance": self.distance,
            "duration": self.duration,
            "waypoints": [asdict(w) for w in self.waypoints],
            "bearing": self.bearing,
            "estimated_flight_time": self.estimated_flight_time,
        }


@dataclass(frozen=True)
class FlightSegment:
    """One animation frame of a flight."""

    lat: float
    lng: float
    altitude: float  # globe units
    progress: float  # 0.0-1.0
    heading: float  # degrees
    timestamp: float  # ms from animation start

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AirplaneRotation:
    """Orientation of the airplane marker in degrees."""

    pitch: float
    yaw: float
    roll: float


@dataclass(frozen=True)
class CameraPosition:
    """Position of the following camera."""

    lat: float
    lng: float
    altitude: float
