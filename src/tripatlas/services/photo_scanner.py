"""Scanning JPEG files and reading EXIF data into photo records."""

import struct
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

import piexif

from tripatlas.core.exceptions import RecordParseError
from tripatlas.core.logger import log_call, log_result, log_warning
from tripatlas.models.photo import Photo

EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"


class PhotoScanner:
    """Scans a directory for JPEG files and reads their EXIF data."""

    JPEG_EXTENSIONS = {".jpg", ".jpeg"}

    def scan(self, directory: Path) -> List[Photo]:
        """Scan a directory and return photo records built from EXIF.

        The file name is the photo id. EXIF times carry no zone and are
        taken as UTC.

        Args:
            directory: Path to the directory with photos

        Returns:
            List of Photo sorted by file name

        Raises:
            RecordParseError: If the directory cannot be listed
        """
        log_call("PhotoScanner", "scan", directory=str(directory))

        try:
            files = sorted(
                p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in self.JPEG_EXTENSIONS
            )
        except OSError as e:
            raise RecordParseError(f"Cannot read directory {directory}: {e}")

        photos = [self.read_photo(path) for path in files]

        log_result("PhotoScanner", "scan", f"{len(photos)} photos")
        return photos

    def read_photo(self, path: Path) -> Photo:
        """Read one photo; unreadable EXIF gives a photo without metadata."""
        try:
            exif_dict = piexif.load(str(path))
        except (piexif.InvalidImageDataError, ValueError, struct.error, OSError) as e:
            log_warning(f"Cannot read EXIF from {path.name}: {e}")
            return Photo(id=path.name)

        coords = self.extract_gps(exif_dict)
        return Photo(
            id=path.name,
            taken_at=self.extract_timestamp(exif_dict),
            latitude=coords[0] if coords else None,
            longitude=coords[1] if coords else None,
            caption=self.extract_description(exif_dict),
        )

    @staticmethod
    def extract_timestamp(exif_dict: dict) -> Optional[datetime]:
        """Extract capture time: DateTimeOriginal, falling back to DateTime."""
        candidates = [
            exif_dict.get("Exif", {}).get(piexif.ExifIFD.DateTimeOriginal),
            exif_dict.get("0th", {}).get(piexif.ImageIFD.DateTime),
        ]
        for value in candidates:
            if not value:
                continue
            try:
                # Format: "2017:04:05 14:32:00"
                text = value.decode("utf-8") if isinstance(value, bytes) else value
                return datetime.strptime(text.strip("\x00 "), EXIF_DATETIME_FORMAT).replace(tzinfo=timezone.utc)
            except (ValueError, AttributeError, UnicodeDecodeError):
                continue
        return None

    @classmethod
    def extract_gps(cls, exif_dict: dict) -> Optional[Tuple[float, float]]:
        """Extract (latitude, longitude) from EXIF GPS data."""
        gps_data = exif_dict.get("GPS", {})
        if not gps_data:
            return None

        lat = gps_data.get(piexif.GPSIFD.GPSLatitude)
        lat_ref = gps_data.get(piexif.GPSIFD.GPSLatitudeRef)
        lng = gps_data.get(piexif.GPSIFD.GPSLongitude)
        lng_ref = gps_data.get(piexif.GPSIFD.GPSLongitudeRef)

        if not all([lat, lat_ref, lng, lng_ref]):
            return None

        try:
            latitude = cls._dms_to_decimal(lat)
            longitude = cls._dms_to_decimal(lng)
        except (ValueError, TypeError, IndexError, ZeroDivisionError):
            return None

        if isinstance(lat_ref, bytes):
            lat_ref = lat_ref.decode("ascii", errors="ignore")
        if isinstance(lng_ref, bytes):
            lng_ref = lng_ref.decode("ascii", errors="ignore")

        if lat_ref.startswith("S"):
            latitude = -latitude
        if lng_ref.startswith("W"):
            longitude = -longitude

        return latitude, longitude

    @staticmethod
    def _dms_to_decimal(dms: tuple) -> float:
        """Convert ((deg, 1), (min, 1), (sec, denom)) rationals to decimal degrees."""
        degrees = dms[0][0] / dms[0][1]
        minutes = dms[1][0] / dms[1][1]
        seconds = dms[2][0] / dms[2][1]
        return degrees + minutes / 60 + seconds / 3600

    @staticmethod
    def extract_description(exif_dict: dict) -> Optional[str]:
        """Extract ImageDescription as the photo caption."""
        description = exif_dict.get("0th", {}).get(piexif.ImageIFD.ImageDescription)
        if not description:
            return None
        if isinstance(description, bytes):
            description = description.decode("utf-8", errors="ignore")
        description = description.strip("\x00 ")
        return description or None
