"""Services for Tripatlas."""

from tripatlas.services.photo_clusterer import PhotoClusterer
from tripatlas.services.album_suggester import AlbumSuggestionEngine, SuggestionObserver
from tripatlas.services.flight_path import FlightPathCalculator
from tripatlas.services.year_planner import YearFlightPlanner
from tripatlas.services.record_loader import RecordLoader
from tripatlas.services.photo_scanner import PhotoScanner

__all__ = [
    "PhotoClusterer",
    "AlbumSuggestionEngine",
    "SuggestionObserver",
    "FlightPathCalculator",
    "YearFlightPlanner",
    "RecordLoader",
    "PhotoScanner",
]
