"""Spatial clustering of geotagged photos."""

from collections import Counter
from typing import Iterable, List, Optional

from tripatlas.core.logger import log_call, log_result
from tripatlas.models.cluster import PhotoCluster
from tripatlas.models.location import haversine_km
from tripatlas.models.photo import Photo


class PhotoClusterer:
    """Groups photos lying within a fixed radius of a seed photo.

    Greedy and order sensitive: every unclustered photo, in input order,
    seeds a new cluster and collects all remaining photos within the radius
    of the seed. Photos without usable coordinates are excluded.
    """

    def __init__(self, radius_km: float = 50.0):
        """
        Args:
            radius_km: Maximum distance from the seed photo in km
        """
        self.radius_km = radius_km

    def cluster(self, photos: Iterable[Photo]) -> List[PhotoCluster]:
        """Partitions photos into clusters.

        Args:
            photos: Photos in the order used for seeding

        Returns:
            List of PhotoCluster in order of their seed photos
        """
        located = [p for p in photos if p.coordinates is not None]
        log_call("PhotoClusterer", "cluster", photos=len(located), radius_km=self.radius_km)

        clusters: List[PhotoCluster] = []
        clustered = [False] * len(located)

        for seed_idx, seed in enumerate(located):
            if clustered[seed_idx]:
                continue

            members = [seed]
            clustered[seed_idx] = True

            for idx in range(seed_idx + 1, len(located)):
                if clustered[idx]:
                    continue
                other = located[idx]
                distance = haversine_km(seed.latitude, seed.longitude, other.latitude, other.longitude)
                if distance <= self.radius_km:
                    members.append(other)
                    clustered[idx] = True

            clusters.append(
                PhotoCluster(
                    id=f"cluster-{seed.id}",
                    latitude=seed.latitude,
                    longitude=seed.longitude,
                    photos=members,
                    location_name=most_common_location(members),
                )
            )

        log_result("PhotoClusterer", "cluster", f"{len(clusters)} clusters")
        return clusters


def most_common_location(photos: List[Photo]) -> Optional[str]:
    """Most frequent location name; ties go to the name seen first."""
    names = Counter(p.location_name for p in photos if p.location_name)
    if not names:
        return None
    return names.most_common(1)[0][0]
