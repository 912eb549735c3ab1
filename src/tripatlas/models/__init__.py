"""Data models for Tripatlas."""

from tripatlas.models.location import GeoPoint, VisitedLocation
from tripatlas.models.photo import Photo
from tripatlas.models.cluster import PhotoCluster
from tripatlas.models.suggestion import AlbumSuggestion
from tripatlas.models.flight import (
    AirplaneRotation,
    CameraPosition,
    FlightPath,
    FlightSegment,
    Waypoint,
)

__all__ = [
    "GeoPoint",
    "VisitedLocation",
    "Photo",
    "PhotoCluster",
    "AlbumSuggestion",
    "FlightPath",
    "FlightSegment",
    "Waypoint",
    "AirplaneRotation",
    "CameraPosition",
]
