"""Model for an album suggestion."""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from tripatlas.models.photo import Photo


@dataclass(frozen=True)
class AlbumSuggestion:
    """Suggested album built from one photo cluster."""

    id: str
    suggested_title: str
    suggested_description: str
    photos: Tuple[Photo, ...]
    start_date: str  # ISO 8601
    end_date: str  # ISO 8601
    confidence_score: int  # 0-100
    reason: str
    location_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def photo_ids(self) -> List[str]:
        return [photo.id for photo in self.photos]

    def with_photos(self, photos: Tuple[Photo, ...], confidence_score: int, **changes: Any) -> "AlbumSuggestion":
        """Copy of the suggestion with a reduced member list and score.

        Other fields (dates, texts) can be replaced through keyword arguments.
        """
        return replace(self, photos=tuple(photos), confidence_score=confidence_score, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "suggested_title": self.suggested_title,
            "suggested_description": self.suggested_description,
            "photo_ids": self.photo_ids,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "location_name": self.location_name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "confidence_score": self.confidence_score,
            "reason": self.reason,
        }
