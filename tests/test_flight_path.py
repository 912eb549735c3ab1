"""Tests for FlightPathCalculator."""

import dataclasses
import math

import pytest
from tripatlas.core.config import FlightConfig
from tripatlas.core.exceptions import InvalidInputError
from tripatlas.models.flight import FlightSegment
from tripatlas.models.location import GeoPoint
from tripatlas.services.flight_path import FlightPathCalculator, rotations

ORIGIN = GeoPoint(0.0, 0.0, "Null Island")
QUARTER_EAST = GeoPoint(0.0, 90.0, "Indian Ocean")
PRAGUE = GeoPoint(50.0755, 14.4378, "Prague")
NEW_YORK = GeoPoint(40.7128, -74.0060, "New York")
SYDNEY = GeoPoint(-33.8688, 151.2093, "Sydney")


def segment(heading=0.0, altitude=0.0, lat=0.0, lng=0.0):
    return FlightSegment(lat=lat, lng=lng, altitude=altitude, progress=0.5, heading=heading, timestamp=0.0)


class TestDistanceAndBearing:
    """Tests for distance() and bearing()."""

    def test_quarter_of_equator(self):
        """(0,0) to (0,90) is a quarter of the equator, heading east."""
        assert FlightPathCalculator.distance(ORIGIN, QUARTER_EAST) == pytest.approx(math.pi / 2 * 6371)
        assert FlightPathCalculator.distance(ORIGIN, QUARTER_EAST) == pytest.approx(10007.5, abs=0.1)
        assert FlightPathCalculator.bearing(ORIGIN, QUARTER_EAST) == pytest.approx(90.0)

    @pytest.mark.parametrize("a,b", [(PRAGUE, NEW_YORK), (SYDNEY, PRAGUE), (NEW_YORK, SYDNEY)])
    def test_symmetric(self, a, b):
        assert FlightPathCalculator.distance(a, b) == pytest.approx(FlightPathCalculator.distance(b, a), rel=1e-6)

    @pytest.mark.parametrize("point", [ORIGIN, PRAGUE, SYDNEY, GeoPoint(90.0, 0.0)])
    def test_same_point(self, point):
        assert FlightPathCalculator.distance(point, point) == 0.0

    @pytest.mark.parametrize("a,b", [(PRAGUE, NEW_YORK), (NEW_YORK, PRAGUE), (SYDNEY, NEW_YORK), (ORIGIN, GeoPoint(-1e-9, 0.0))])
    def test_bearing_range(self, a, b):
        assert 0.0 <= FlightPathCalculator.bearing(a, b) < 360.0

    def test_bearing_not_reversed_exactly(self):
        """On a sphere the return bearing is not simply +180."""
        there = FlightPathCalculator.bearing(PRAGUE, NEW_YORK)
        back = FlightPathCalculator.bearing(NEW_YORK, PRAGUE)
        assert abs(((there + 180) % 360) - back) > 1.0


class TestGenerateFlightPath:
    """Tests for generate_flight_path()."""

    def test_waypoints(self):
        """Default 100 segments give 101 waypoints from start to end."""
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        assert len(path.waypoints) == 101
        assert path.waypoints[0].lat == pytest.approx(PRAGUE.latitude)
        assert path.waypoints[0].lng == pytest.approx(PRAGUE.longitude)
        assert path.waypoints[-1].lat == pytest.approx(NEW_YORK.latitude)
        assert path.waypoints[-1].lng == pytest.approx(NEW_YORK.longitude)

    def test_custom_segments(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK, segments=10)
        assert len(path.waypoints) == 11

    def test_great_circle_midpoint(self):
        """The midpoint of the equatorial quarter is (0, 45)."""
        path = FlightPathCalculator.generate_flight_path(ORIGIN, QUARTER_EAST)
        assert path.waypoints[50].lat == pytest.approx(0.0, abs=1e-9)
        assert path.waypoints[50].lng == pytest.approx(45.0)

    def test_great_circle_bends_north(self):
        """A transatlantic route passes north of both endpoints."""
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        assert max(w.lat for w in path.waypoints) > PRAGUE.latitude

    def test_long_flight_duration_capped(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        assert path.duration == 8000
        assert path.estimated_flight_time == pytest.approx(path.distance / 900)
        assert path.bearing == pytest.approx(FlightPathCalculator.bearing(PRAGUE, NEW_YORK))

    def test_short_flight_duration_floor(self):
        path = FlightPathCalculator.generate_flight_path(ORIGIN, GeoPoint(0.0, 0.05))
        assert path.duration == 3000

    def test_medium_flight_duration_scales(self):
        path = FlightPathCalculator.generate_flight_path(ORIGIN, GeoPoint(0.0, 0.9))
        assert path.duration == pytest.approx(path.distance * 50)
        assert 3000 < path.duration < 8000

    def test_same_point(self):
        """A flight to the same place stays put."""
        path = FlightPathCalculator.generate_flight_path(PRAGUE, PRAGUE)
        assert path.distance == 0.0
        assert path.duration == 3000
        assert path.bearing == 0.0
        assert all(w.lat == PRAGUE.latitude and w.lng == PRAGUE.longitude for w in path.waypoints)

    def test_invalid_segments(self):
        with pytest.raises(InvalidInputError):
            FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK, segments=0)

    def test_config_is_read_only(self):
        """The shared configuration cannot be changed through the calculator."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            FlightPathCalculator.config.segments = 5
        assert FlightPathCalculator.config.segments == FlightConfig().segments


class TestGenerateFlightSegments:
    """Tests for generate_flight_segments()."""

    def test_frame_count(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        segments = FlightPathCalculator.generate_flight_segments(path)
        assert len(segments) == math.floor(path.duration / 1000 * 60) + 1 == 481

    def test_frame_count_non_integral_duration(self):
        path = FlightPathCalculator.generate_flight_path(ORIGIN, GeoPoint(0.0, 0.9))
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=30)
        assert len(segments) == math.floor(path.duration / 1000 * 30) + 1

    def test_progress_and_timestamps(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=10)
        assert segments[0].progress == 0.0
        assert segments[-1].progress == pytest.approx(1.0)
        assert segments[0].timestamp == 0.0
        assert segments[-1].timestamp == pytest.approx(8000.0)
        progresses = [s.progress for s in segments]
        assert progresses == sorted(progresses)

    def test_positions_follow_waypoints(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=10)
        assert (segments[0].lat, segments[0].lng) == pytest.approx((PRAGUE.latitude, PRAGUE.longitude))
        assert (segments[-1].lat, segments[-1].lng) == pytest.approx((NEW_YORK.latitude, NEW_YORK.longitude))

    def test_altitude_profile_long_haul(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=10)
        by_progress = {round(s.progress, 4): s.altitude for s in segments}

        assert by_progress[0.0] == 0.0
        assert by_progress[0.05] == pytest.approx(0.01)
        assert by_progress[0.5] == pytest.approx(0.02)
        assert by_progress[0.95] == pytest.approx(0.01)
        assert segments[-1].altitude == pytest.approx(0.0)
        assert max(s.altitude for s in segments) == pytest.approx(0.02)

    def test_altitude_profile_short_haul(self):
        path = FlightPathCalculator.generate_flight_path(ORIGIN, GeoPoint(0.0, 2.0))
        segments = FlightPathCalculator.generate_flight_segments(path)
        assert path.distance < 500
        assert max(s.altitude for s in segments) == pytest.approx(0.012)

    def test_heading_east_along_equator(self):
        """Every frame of an eastbound equatorial flight heads east, the last one too."""
        path = FlightPathCalculator.generate_flight_path(ORIGIN, QUARTER_EAST)
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=10)
        for s in segments:
            assert s.heading == pytest.approx(90.0, abs=1e-6)

    def test_heading_same_point(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, PRAGUE)
        segments = FlightPathCalculator.generate_flight_segments(path, frame_rate=5)
        assert len(segments) == 16
        assert all(s.heading == 0.0 for s in segments)

    def test_restartable(self):
        """Each call materializes a fresh, identical sequence."""
        path = FlightPathCalculator.generate_flight_path(PRAGUE, SYDNEY)
        first = FlightPathCalculator.generate_flight_segments(path, frame_rate=5)
        second = FlightPathCalculator.generate_flight_segments(path, frame_rate=5)
        assert first == second
        assert first is not second

    def test_invalid_frame_rate(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, SYDNEY)
        with pytest.raises(InvalidInputError):
            FlightPathCalculator.generate_flight_segments(path, frame_rate=0)


class TestAirplaneRotation:
    """Tests for calculate_airplane_rotation()."""

    def test_boundaries(self):
        rotation = FlightPathCalculator.calculate_airplane_rotation(segment(heading=45.0), None, None)
        assert rotation.pitch == 0.0
        assert rotation.roll == 0.0
        assert rotation.yaw == 45.0

    def test_pitch_from_climb(self):
        rotation = FlightPathCalculator.calculate_airplane_rotation(
            segment(altitude=0.001), None, segment(altitude=0.002)
        )
        assert rotation.pitch == pytest.approx(45.0)

    def test_roll_wraps_and_clamps(self):
        """A 20 degree turn across north banks at the 30 degree limit."""
        rotation = FlightPathCalculator.calculate_airplane_rotation(segment(heading=10.0), segment(heading=350.0), None)
        assert rotation.roll == 30.0

    def test_roll_left(self):
        rotation = FlightPathCalculator.calculate_airplane_rotation(segment(heading=355.0), segment(heading=5.0), None)
        assert rotation.roll == pytest.approx(-20.0)

    def test_rotations_helper(self):
        path = FlightPathCalculator.generate_flight_path(PRAGUE, NEW_YORK)
        frames = rotations(FlightPathCalculator.generate_flight_segments(path, frame_rate=5))
        assert frames[0][1].roll == 0.0
        assert frames[-1][1].pitch == 0.0
        assert all(-30.0 <= r.roll <= 30.0 for _, r in frames)


class TestCameraPosition:
    """Tests for calculate_camera_position()."""

    def test_trails_behind_northbound(self):
        camera = FlightPathCalculator.calculate_camera_position(segment(heading=0.0, altitude=0.02, lat=10.0, lng=20.0))
        assert camera.lat == pytest.approx(9.95)
        assert camera.lng == pytest.approx(20.0)
        assert camera.altitude == pytest.approx(0.52)

    def test_trails_behind_eastbound(self):
        camera = FlightPathCalculator.calculate_camera_position(segment(heading=90.0, lat=10.0, lng=20.0))
        assert camera.lat == pytest.approx(10.0)
        assert camera.lng == pytest.approx(19.95)
