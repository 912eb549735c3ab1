"""Shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from tripatlas.models.photo import Photo

PARIS = (48.8566, 2.3522)


def make_photos(prefix, start, count, lat=PARIS[0], lng=PARIS[1], location_name="Paris, France", step=timedelta(hours=1)):
    """Photos taken every `step` from `start`, spread a few hundred meters apart."""
    return [
        Photo(
            id=f"{prefix}{i}",
            taken_at=start + step * i,
            latitude=None if lat is None else lat + i * 0.001,
            longitude=lng,
            location_name=location_name,
        )
        for i in range(count)
    ]


@pytest.fixture
def march_15():
    return datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)
