"""Model for a spatial photo cluster."""

from dataclasses import dataclass, field
from typing import List, Optional

from tripatlas.models.photo import Photo


@dataclass
class PhotoCluster:
    """Photos taken within a radius of a seed photo."""

    id: str
    latitude: float
    longitude: float
    photos: List[Photo] = field(default_factory=list)
    location_name: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.photos)

    def representative_photo(self) -> Photo:
        """Photo to show for the cluster.

        Priority: first captioned photo > first favorite > first photo
        """
        for photo in self.photos:
            if photo.caption:
                return photo
        for photo in self.photos:
            if photo.is_favorite:
                return photo
        return self.photos[0]
