"""Models for geographic points and visited locations."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from tripatlas.core.exceptions import InvalidInputError

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates in km (haversine formula)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def initial_bearing(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Initial great-circle bearing from the first to the second coordinate, in [0, 360)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlng = math.radians(lng2 - lng1)

    y = math.sin(dlng) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlng)

    bearing = (math.degrees(math.atan2(y, x)) + 360) % 360
    # -0.0 and values rounding up to 360.0 both belong at north
    return 0.0 if bearing >= 360 else bearing + 0.0


@dataclass(frozen=True)
class GeoPoint:
    """Point on the globe with an optional name."""

    latitude: float
    longitude: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise InvalidInputError(f"Latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise InvalidInputError(f"Longitude out of range: {self.longitude}")

    @classmethod
    def from_geo_string(cls, geo_string: str, name: Optional[str] = None) -> Optional["GeoPoint"]:
        """Parse a 'geo:lat,lng' URI.

        Args:
            geo_string: String in format "geo:48.856600,2.352200"
            name: Optional place name for the point

        Returns:
            GeoPoint or None if parsing fails
        """
        if not geo_string or not geo_string.startswith("geo:"):
            return None
        try:
            lat_str, lng_str = geo_string[4:].split(",")
            return cls(latitude=float(lat_str), longitude=float(lng_str), name=name)
        except (ValueError, InvalidInputError):
            return None

    def distance_to(self, other: "GeoPoint") -> float:
        """Distance to another point in km."""
        return haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)

    def bearing_to(self, other: "GeoPoint") -> float:
        """Initial bearing towards another point in degrees."""
        return initial_bearing(self.latitude, self.longitude, other.latitude, other.longitude)

    def to_dict(self) -> Dict[str, Any]:
        return {"lat": self.latitude, "lng": self.longitude, "name": self.name}

    def __str__(self) -> str:
        coords = f"{self.latitude:.6f}, {self.longitude:.6f}"
        if self.name:
            return f"{self.name} ({coords})"
        return coords


@dataclass(frozen=True)
class VisitedLocation:
    """A place visited on a given date, one stop of a year's travel."""

    point: GeoPoint
    visited_at: datetime

    @property
    def name(self) -> Optional[str]:
        return self.point.name

    def __lt__(self, other: "VisitedLocation") -> bool:
        """For sorting by visit date."""
        return self.visited_at < other.visited_at
