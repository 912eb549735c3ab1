"""Great-circle flight paths and animation frames for the globe."""

import math
from typing import Iterable, List, Optional, Tuple

from tripatlas.core.config import FlightConfig
from tripatlas.core.exceptions import InvalidInputError
from tripatlas.core.logger import log_call, log_result
from tripatlas.models.flight import (
    AirplaneRotation,
    CameraPosition,
    FlightPath,
    FlightSegment,
    Waypoint,
)
from tripatlas.models.location import EARTH_RADIUS_KM, GeoPoint, VisitedLocation, initial_bearing

# Horizontal run used to turn an altitude change into a pitch angle
PITCH_RUN = 0.001
MAX_BANK_ANGLE = 30.0


class FlightPathCalculator:
    """Geometry for animating flights between visited places.

    All methods are pure functions of their arguments.
    """

    config = FlightConfig()

    @staticmethod
    def distance(start: GeoPoint, end: GeoPoint) -> float:
        """Great-circle distance in km."""
        return start.distance_to(end)

    @staticmethod
    def bearing(start: GeoPoint, end: GeoPoint) -> float:
        """Initial bearing from start to end in degrees, [0, 360)."""
        return start.bearing_to(end)

    @classmethod
    def generate_flight_path(
        cls, start: GeoPoint, end: GeoPoint, segments: Optional[int] = None
    ) -> FlightPath:
        """Builds a flight path with great-circle waypoints.

        Args:
            start: Departure point
            end: Arrival point
            segments: Number of steps between start and end (segments + 1 waypoints)

        Returns:
            FlightPath
        """
        config = cls.config
        if segments is None:
            segments = config.segments
        if segments < 1:
            raise InvalidInputError(f"segments must be at least 1, got {segments}")

        log_call("FlightPathCalculator", "generate_flight_path", start=start, end=end, segments=segments)

        distance = cls.distance(start, end)
        duration = min(config.max_duration_ms, max(config.min_duration_ms, distance * config.ms_per_km))

        path = FlightPath(
            start=start,
            end=end,
            distance=distance,
            duration=duration,
            waypoints=tuple(cls._great_circle_waypoints(start, end, segments)),
            bearing=cls.bearing(start, end),
            estimated_flight_time=distance / config.cruise_speed_kmh,
        )

        log_result("FlightPathCalculator", "generate_flight_path", f"{distance:.1f} km, {duration:.0f} ms")
        return path

    @staticmethod
    def _great_circle_waypoints(start: GeoPoint, end: GeoPoint, segments: int) -> List[Waypoint]:
        """Spherical linear interpolation from start to end in equal steps."""
        lat1 = math.radians(start.latitude)
        lng1 = math.radians(start.longitude)
        lat2 = math.radians(end.latitude)
        lng2 = math.radians(end.longitude)

        angle = start.distance_to(end) / EARTH_RADIUS_KM
        sin_angle = math.sin(angle)

        if sin_angle < 1e-12:
            # Same point (or antipodes, where the great circle is undefined)
            return [Waypoint(start.latitude, start.longitude) for _ in range(segments + 1)]

        waypoints = []
        for i in range(segments + 1):
            f = i / segments
            a = math.sin((1 - f) * angle) / sin_angle
            b = math.sin(f * angle) / sin_angle

            x = a * math.cos(lat1) * math.cos(lng1) + b * math.cos(lat2) * math.cos(lng2)
            y = a * math.cos(lat1) * math.sin(lng1) + b * math.cos(lat2) * math.sin(lng2)
            z = a * math.sin(lat1) + b * math.sin(lat2)

            lat = math.atan2(z, math.sqrt(x * x + y * y))
            lng = math.atan2(y, x)
            waypoints.append(Waypoint(math.degrees(lat), math.degrees(lng)))

        return waypoints

    @classmethod
    def generate_flight_segments(
        cls, flight_path: FlightPath, frame_rate: Optional[int] = None
    ) -> List[FlightSegment]:
        """Samples the flight into animation frames.

        Position is interpolated linearly between the two nearest waypoints;
        altitude follows a climb (first 10%), cruise, descent (last 10%) profile.

        Args:
            flight_path: Path from generate_flight_path()
            frame_rate: Frames per second

        Returns:
            floor(duration_s * frame_rate) + 1 segments in playback order
        """
        if frame_rate is None:
            frame_rate = cls.config.frame_rate
        if frame_rate <= 0:
            raise InvalidInputError(f"frame_rate must be positive, got {frame_rate}")

        waypoints = flight_path.waypoints
        last = len(waypoints) - 1
        total_frames = math.floor(flight_path.duration / 1000 * frame_rate)

        segments = []
        for frame in range(total_frames + 1):
            progress = frame / total_frames if total_frames else 0.0
            position = progress * last
            index = min(math.floor(position), last)
            fraction = position - index

            current = waypoints[index]
            following = waypoints[min(index + 1, last)]

            lat = current.lat + (following.lat - current.lat) * fraction
            lng = current.lng + (following.lng - current.lng) * fraction

            segments.append(
                FlightSegment(
                    lat=lat,
                    lng=lng,
                    altitude=cls._altitude(progress, flight_path.distance),
                    progress=progress,
                    heading=cls._heading(flight_path, index, lat, lng),
                    timestamp=frame / frame_rate * 1000,
                )
            )

        return segments

    @staticmethod
    def _heading(flight_path: FlightPath, index: int, lat: float, lng: float) -> float:
        """Bearing from the interpolated position to the next waypoint.

        Falls back to the enclosing waypoint pair when the position sits on the
        next waypoint, and to the path bearing when that pair is degenerate too.
        """
        waypoints = flight_path.waypoints
        last = len(waypoints) - 1
        target = waypoints[min(index + 1, last)]
        if (lat, lng) != (target.lat, target.lng):
            return initial_bearing(lat, lng, target.lat, target.lng)

        pair = (waypoints[max(index - 1, 0)], target) if index + 1 > last else (waypoints[index], target)
        if (pair[0].lat, pair[0].lng) != (pair[1].lat, pair[1].lng):
            return initial_bearing(pair[0].lat, pair[0].lng, pair[1].lat, pair[1].lng)
        return flight_path.bearing

    @classmethod
    def _altitude(cls, progress: float, distance: float) -> float:
        config = cls.config
        cruise = config.cruise_altitude
        if distance < config.short_haul_km:
            cruise *= config.short_haul_factor

        if progress < 0.1:
            return progress / 0.1 * cruise
        if progress > 0.9:
            return (1 - progress) / 0.1 * cruise
        return cruise

    @staticmethod
    def calculate_airplane_rotation(
        current: FlightSegment,
        previous: Optional[FlightSegment],
        next_segment: Optional[FlightSegment],
    ) -> AirplaneRotation:
        """Pitch from the climb to the next frame, roll from the turn since the previous one."""
        pitch = 0.0
        if next_segment is not None:
            pitch = math.degrees(math.atan2(next_segment.altitude - current.altitude, PITCH_RUN))

        roll = 0.0
        if previous is not None:
            change = current.heading - previous.heading
            if change > 180:
                change -= 360
            if change < -180:
                change += 360
            roll = max(-MAX_BANK_ANGLE, min(MAX_BANK_ANGLE, change * 2))

        return AirplaneRotation(pitch=pitch, yaw=current.heading, roll=roll)

    @classmethod
    def calculate_camera_position(cls, segment: FlightSegment) -> CameraPosition:
        """Camera point trailing behind and above the airplane."""
        config = cls.config
        behind = math.radians(segment.heading + 180)
        return CameraPosition(
            lat=segment.lat + math.cos(behind) * config.camera_trail,
            lng=segment.lng + math.sin(behind) * config.camera_trail,
            altitude=segment.altitude + config.camera_height,
        )

    @staticmethod
    def generate_year_flight_paths(locations: Iterable[VisitedLocation]) -> List[FlightPath]:
        """Flight paths between consecutive visits, see YearFlightPlanner."""
        from tripatlas.services.year_planner import YearFlightPlanner

        return YearFlightPlanner().plan(locations)


def rotations(segments: List[FlightSegment]) -> List[Tuple[FlightSegment, AirplaneRotation]]:
    """Pairs every frame with its airplane rotation."""
    result = []
    for idx, segment in enumerate(segments):
        previous = segments[idx - 1] if idx > 0 else None
        following = segments[idx + 1] if idx + 1 < len(segments) else None
        result.append((segment, FlightPathCalculator.calculate_airplane_rotation(segment, previous, following)))
    return result
