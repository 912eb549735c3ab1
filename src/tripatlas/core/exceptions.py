"""Custom exceptions for Tripatlas."""


class TripAtlasError(Exception):
    """Base exception for Tripatlas."""

    pass


class RecordParseError(TripAtlasError):
    """Photo or location records could not be loaded."""

    pass


class InvalidInputError(TripAtlasError):
    """Argument outside of the range an operation accepts."""

    pass
