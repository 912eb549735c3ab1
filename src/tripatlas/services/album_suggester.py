"""Album suggestions from date and location clusters of photos."""

import math
from datetime import datetime
from typing import AbstractSet, Iterable, List, Optional, Protocol, Sequence, Tuple

from tripatlas.core.config import SuggestionConfig
from tripatlas.core.logger import log_call, log_info, log_result
from tripatlas.models.cluster import PhotoCluster
from tripatlas.models.photo import Photo
from tripatlas.models.suggestion import AlbumSuggestion
from tripatlas.services.photo_clusterer import PhotoClusterer

SECONDS_PER_DAY = 24 * 60 * 60


class SuggestionObserver(Protocol):
    """Hook for callers that report usage events about suggestions.

    The engine never calls it; the calling layer does after consuming results.
    """

    def suggestions_generated(self, suggestions: Sequence[AlbumSuggestion]) -> None: ...


def day_span(start: datetime, end: datetime) -> int:
    """Calendar days between two timestamps (0 when both fall on the same date).

    Dates are read in each timestamp's own zone.
    """
    return max(0, (end.date() - start.date()).days)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class AlbumSuggestionEngine:
    """Suggests albums from an unsorted photo collection.

    Photos are first split into trips by capture time (a gap of more than
    ``day_gap_threshold`` days starts a new trip), then each trip is split by
    location with PhotoClusterer. Every resulting cluster with enough photos
    becomes a scored suggestion.
    """

    def __init__(self, config: Optional[SuggestionConfig] = None):
        self.config = config or SuggestionConfig()
        self.clusterer = PhotoClusterer(radius_km=self.config.cluster_radius_km)

    def suggest(self, photos: Iterable[Photo]) -> List[AlbumSuggestion]:
        """Generates album suggestions sorted by confidence (highest first).

        Args:
            photos: Photo records; photos without a capture time are ignored

        Returns:
            List of AlbumSuggestion, empty if nothing qualifies
        """
        dated = sorted((p for p in photos if p.taken_at is not None), key=lambda p: p.taken_at_utc)
        log_call("AlbumSuggestionEngine", "suggest", dated_photos=len(dated))

        suggestions = []
        for group in self._group_by_date(dated):
            for cluster in self.clusterer.cluster(group):
                if cluster.count < self.config.min_photos:
                    continue
                suggestions.append(self._build_suggestion(cluster))

        # sorted() is stable, ties keep discovery order
        suggestions = sorted(suggestions, key=lambda s: s.confidence_score, reverse=True)

        log_result("AlbumSuggestionEngine", "suggest", f"{len(suggestions)} suggestions")
        return suggestions

    def filter_existing_albums(
        self,
        suggestions: Iterable[AlbumSuggestion],
        existing_photo_ids: AbstractSet[str],
    ) -> List[AlbumSuggestion]:
        """Removes photos that already belong to an album.

        Suggestions left with fewer than ``min_photos`` photos are dropped; the
        others keep their order and get their confidence scaled by the share
        of photos that remain.

        Args:
            suggestions: Suggestions from suggest()
            existing_photo_ids: IDs of photos already assigned to albums

        Returns:
            Filtered list of AlbumSuggestion
        """
        log_call("AlbumSuggestionEngine", "filter_existing_albums", existing=len(existing_photo_ids))

        result = []
        for suggestion in suggestions:
            remaining = tuple(p for p in suggestion.photos if p.id not in existing_photo_ids)
            if len(remaining) < self.config.min_photos:
                log_info(f"dropping {suggestion.id}, {len(remaining)} photos left")
                continue

            if len(remaining) == len(suggestion.photos):
                result.append(suggestion)
                continue

            score = round_half_up(suggestion.confidence_score * len(remaining) / len(suggestion.photos))
            result.append(self._narrow(suggestion, remaining, score))

        log_result("AlbumSuggestionEngine", "filter_existing_albums", f"{len(result)} suggestions")
        return result

    def _group_by_date(self, photos: List[Photo]) -> List[List[Photo]]:
        """Splits time-sorted photos at gaps larger than the threshold."""
        if not photos:
            return []

        max_gap = self.config.day_gap_threshold * SECONDS_PER_DAY
        groups: List[List[Photo]] = []
        current = [photos[0]]

        for prev_photo, photo in zip(photos, photos[1:]):
            gap = (photo.taken_at_utc - prev_photo.taken_at_utc).total_seconds()
            if gap <= max_gap:
                current.append(photo)
            else:
                if len(current) >= self.config.min_photos:
                    groups.append(current)
                current = [photo]

        # Last group
        if len(current) >= self.config.min_photos:
            groups.append(current)

        log_info(f"{len(groups)} date groups")
        return groups

    def _build_suggestion(self, cluster: PhotoCluster) -> AlbumSuggestion:
        start, end = capture_range(cluster.photos)
        days = day_span(start, end)

        return AlbumSuggestion(
            id=f"suggestion-{cluster.id}",
            suggested_title=self._title(cluster.location_name, start),
            suggested_description=self._description(cluster.count, cluster.location_name, days),
            photos=tuple(cluster.photos),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            location_name=cluster.location_name,
            latitude=cluster.latitude,
            longitude=cluster.longitude,
            confidence_score=confidence_score(cluster, days),
            reason=self._reason(cluster.count, cluster.location_name, days),
        )

    def _narrow(self, suggestion: AlbumSuggestion, photos: Tuple[Photo, ...], score: int) -> AlbumSuggestion:
        """Suggestion restricted to `photos`, with dates and texts rebuilt for them."""
        if any(p.taken_at is None for p in photos):
            return suggestion.with_photos(photos, score)

        start, end = capture_range(photos)
        days = day_span(start, end)
        location = suggestion.location_name
        return suggestion.with_photos(
            photos,
            score,
            suggested_title=self._title(location, start),
            suggested_description=self._description(len(photos), location, days),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            reason=self._reason(len(photos), location, days),
        )

    @staticmethod
    def _title(location_name: Optional[str], start: datetime) -> str:
        month_year = start.strftime("%B %Y")
        if location_name:
            city = location_name.split(",")[0].strip()
            if city:
                return f"{city}, {month_year}"
        return f"Trip, {month_year}"

    @staticmethod
    def _description(count: int, location_name: Optional[str], days: int) -> str:
        if days == 0:
            if location_name:
                return f"{count} photos from a day in {location_name}."
            return f"{count} photos from a day."
        if location_name:
            return f"{count} photos from a {days + 1}-day trip to {location_name}."
        return f"{count} photos from a {days + 1}-day trip."

    @staticmethod
    def _reason(count: int, location_name: Optional[str], days: int) -> str:
        parts = [f"{count} photos taken"]
        parts.append("on the same day" if days == 0 else f"over {days + 1} days")
        if location_name:
            parts.append(f"in {location_name}")
        return " ".join(parts) + "."


def capture_range(photos: Sequence[Photo]) -> Tuple[datetime, datetime]:
    """Earliest and latest capture time of dated photos (naive times as UTC)."""
    dates = sorted(p.taken_at_utc for p in photos)
    return dates[0], dates[-1]


def confidence_score(cluster: PhotoCluster, days: int) -> int:
    """Scores how likely a cluster is a coherent trip, 0-100.

    Sum of photo count (max 30), location data (max 25), date range
    tightness (max 25) and photos per day (max 20).
    """
    score = 0
    count = cluster.count

    if count >= 20:
        score += 30
    elif count >= 10:
        score += 25
    elif count >= 5:
        score += 20
    else:
        score += 15

    if cluster.location_name:
        score += 25
    elif cluster.latitude is not None and cluster.longitude is not None:
        score += 15

    if days <= 7:
        score += 25
    elif days <= 14:
        score += 20
    elif days <= 30:
        score += 15
    else:
        score += 10

    per_day = count / (days + 1)
    if per_day >= 5:
        score += 20
    elif per_day >= 3:
        score += 15
    elif per_day >= 1:
        score += 10
    else:
        score += 5

    return min(100, score)
