"""Model for a photo record."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from tripatlas.core.exceptions import InvalidInputError
from tripatlas.models.location import GeoPoint


@dataclass(frozen=True)
class Photo:
    """Photo record with the metadata used for album suggestions.

    Every field except the id is optional; a missing field is simply
    "no signal" for grouping and scoring.
    """

    id: str
    taken_at: Optional[datetime] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location_name: Optional[str] = None
    caption: Optional[str] = None
    is_favorite: bool = False

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def taken_at_utc(self) -> Optional[datetime]:
        """Capture time with naive values taken as UTC, so all photos compare."""
        if self.taken_at is None or self.taken_at.tzinfo is not None:
            return self.taken_at
        return self.taken_at.replace(tzinfo=timezone.utc)

    @property
    def coordinates(self) -> Optional[GeoPoint]:
        """Coordinates as a GeoPoint, None if missing or out of range."""
        if not self.has_location:
            return None
        try:
            return GeoPoint(self.latitude, self.longitude, self.location_name)
        except InvalidInputError:
            return None
