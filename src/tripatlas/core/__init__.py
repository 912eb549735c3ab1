"""Core modules for Tripatlas."""

from tripatlas.core.config import SuggestionConfig, FlightConfig
from tripatlas.core.exceptions import TripAtlasError, RecordParseError, InvalidInputError
from tripatlas.core import logger

__all__ = [
    "SuggestionConfig",
    "FlightConfig",
    "TripAtlasError",
    "RecordParseError",
    "InvalidInputError",
    "logger",
]
