"""Loading photo and visited-location records from JSON."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Set

from tripatlas.core.exceptions import InvalidInputError, RecordParseError
from tripatlas.core.logger import log_call, log_result, log_warning
from tripatlas.models.location import GeoPoint, VisitedLocation
from tripatlas.models.photo import Photo


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parses an ISO 8601 timestamp; naive values are taken as UTC.

    Returns:
        Timezone-aware datetime or None if the value is missing or invalid
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        text = value.strip()
        # fromisoformat() only understands the "Z" suffix since Python 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class RecordLoader:
    """Loads photo and location records exported by the journal app.

    Files hold a JSON list of objects, or an object with the list under
    "photos" / "locations". Malformed optional fields count as missing.
    """

    def load_photos(self, path: Path) -> List[Photo]:
        """Loads photo records.

        Args:
            path: Path to the JSON file

        Returns:
            List of Photo in file order

        Raises:
            RecordParseError: If the file cannot be read or has no record list
        """
        log_call("RecordLoader", "load_photos", path=str(path))
        records = self._read_records(path, "photos")

        photos = []
        for idx, record in enumerate(records):
            photo = self.photo_from_record(record)
            if photo is None:
                log_warning(f"Skipping photo record #{idx}: missing id")
                continue
            photos.append(photo)

        log_result("RecordLoader", "load_photos", f"{len(photos)} photos")
        return photos

    def load_locations(self, path: Path) -> List[VisitedLocation]:
        """Loads visited-location records.

        Records need a date and either lat/lng or a "geo:lat,lng" string.

        Raises:
            RecordParseError: If the file cannot be read or has no record list
        """
        log_call("RecordLoader", "load_locations", path=str(path))
        records = self._read_records(path, "locations")

        locations = []
        for idx, record in enumerate(records):
            location = self.location_from_record(record)
            if location is None:
                log_warning(f"Skipping location record #{idx}: missing date or coordinates")
                continue
            locations.append(location)

        log_result("RecordLoader", "load_locations", f"{len(locations)} locations")
        return locations

    def load_photo_ids(self, path: Path) -> Set[str]:
        """Loads a JSON list of photo IDs (e.g. photos already in albums)."""
        log_call("RecordLoader", "load_photo_ids", path=str(path))
        records = self._read_records(path, "photo_ids")
        return {str(item) for item in records if item is not None}

    @staticmethod
    def photo_from_record(record: Any) -> Optional[Photo]:
        """Builds a Photo from one record, None if it has no id."""
        if not isinstance(record, dict) or record.get("id") is None:
            return None

        latitude = _as_float(record.get("latitude"))
        longitude = _as_float(record.get("longitude"))
        if latitude is None or longitude is None:
            latitude = longitude = None

        return Photo(
            id=str(record["id"]),
            taken_at=parse_timestamp(record.get("taken_at")),
            latitude=latitude,
            longitude=longitude,
            location_name=_as_text(record.get("location_name")),
            caption=_as_text(record.get("caption")),
            is_favorite=record.get("is_favorite") is True,
        )

    @staticmethod
    def location_from_record(record: Any) -> Optional[VisitedLocation]:
        """Builds a VisitedLocation from one record, None if incomplete."""
        if not isinstance(record, dict):
            return None

        visited_at = parse_timestamp(record.get("date"))
        if visited_at is None:
            return None

        name = _as_text(record.get("name"))
        lat = _as_float(record.get("lat", record.get("latitude")))
        lng = _as_float(record.get("lng", record.get("longitude")))

        point = None
        if lat is not None and lng is not None:
            try:
                point = GeoPoint(latitude=lat, longitude=lng, name=name)
            except InvalidInputError:
                return None
        elif isinstance(record.get("geo"), str):
            point = GeoPoint.from_geo_string(record["geo"], name=name)

        if point is None:
            return None
        return VisitedLocation(point=point, visited_at=visited_at)

    @staticmethod
    def _read_records(path: Path, key: str) -> list:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise RecordParseError(f"Invalid JSON format in {path}: {e}")
        except FileNotFoundError:
            raise RecordParseError(f"File not found: {path}")
        except OSError as e:
            raise RecordParseError(f"Error reading file {path}: {e}")

        if isinstance(data, dict):
            data = data.get(key)
        if not isinstance(data, list):
            raise RecordParseError(f"Expected a list of {key} in {path}")
        return data
