"""Flight plan for a year of travel."""

from typing import Iterable, List, Optional

from tripatlas.core.config import FlightConfig
from tripatlas.core.logger import log_call, log_result
from tripatlas.models.flight import FlightPath
from tripatlas.models.location import VisitedLocation
from tripatlas.services.flight_path import FlightPathCalculator


class YearFlightPlanner:
    """Connects visited places into consecutive flights, in visit order."""

    def __init__(self, segments: Optional[int] = None):
        """
        Args:
            segments: Great-circle steps per flight, FlightConfig.segments if not given
        """
        self.segments = FlightConfig().segments if segments is None else segments

    def plan(self, locations: Iterable[VisitedLocation]) -> List[FlightPath]:
        """Returns one flight path per pair of consecutive visits.

        Args:
            locations: Visited locations in any order (not modified)

        Returns:
            n - 1 flight paths for n locations, empty for fewer than two
        """
        ordered = sorted(locations, key=lambda loc: loc.visited_at)
        log_call("YearFlightPlanner", "plan", locations=len(ordered))

        paths = [
            FlightPathCalculator.generate_flight_path(origin.point, destination.point, self.segments)
            for origin, destination in zip(ordered, ordered[1:])
        ]

        log_result("YearFlightPlanner", "plan", f"{len(paths)} flights")
        return paths
