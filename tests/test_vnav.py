"""Tests for VNAV guidance in vnav.py"""

import math

import pytest

from flight_perf.vnav import vnav_guidance, INFINITE_TIME_MIN


class TestVnavGuidance:
    """Tests for the vnav_guidance function."""

    @pytest.fixture
    def descent(self):
        """FL350 to 10000 ft over 100 nm at 450 kt, descending at 1500 fpm."""
        return vnav_guidance(35000.0, 10000.0, 100.0, 450.0, -1500.0)

    def test_descent_flags(self, descent):
        assert descent.is_descent
        assert descent.altitude_to_lose_ft == 25000.0

    def test_flight_path_angle(self, descent):
        expected = math.degrees(math.atan(-25000.0 / (100.0 * 6076.12)))
        assert descent.flight_path_angle_deg == pytest.approx(expected)
        assert descent.flight_path_angle_deg < 0.0

    def test_required_vs(self, descent):
        assert descent.required_vs_fpm == pytest.approx(101.27 * 450.0 * (-25000.0 / (100.0 * 6076.12)))

    def test_tod_for_three_degrees(self, descent):
        """About 318 ft per nm on a 3 deg path."""
        assert descent.tod_distance_nm == pytest.approx(25000.0 / (6076.12 * math.tan(math.radians(3.0))))
        assert descent.tod_distance_nm == pytest.approx(78.5, abs=0.1)

    def test_time_and_distance_per_thousand(self, descent):
        assert descent.time_to_constraint_min == pytest.approx(25000.0 / 1500.0)
        assert descent.distance_per_1000ft == pytest.approx(4.0)

    def test_vs_for_three_degrees_sign(self, descent):
        """Positive for descents, negative for climbs."""
        assert descent.vs_for_3deg == pytest.approx(101.27 * 450.0 * math.tan(math.radians(3.0)))
        climb = vnav_guidance(5000.0, 9000.0, 20.0, 120.0, 700.0)
        assert not climb.is_descent
        assert climb.vs_for_3deg < 0.0
        assert climb.altitude_to_lose_ft == -4000.0

    def test_level_vs_gives_sentinel_time(self):
        assert vnav_guidance(5000.0, 3000.0, 10.0, 120.0, 0.0).time_to_constraint_min == INFINITE_TIME_MIN

    def test_no_altitude_change(self):
        level = vnav_guidance(5000.0, 5000.0, 10.0, 120.0, 0.0)
        assert level.distance_per_1000ft == 0.0
        assert level.tod_distance_nm == 0.0
        assert not level.is_descent

    def test_floors_distance_and_groundspeed(self):
        """Zero distance and groundspeed do not divide by zero."""
        r = vnav_guidance(5000.0, 3000.0, 0.0, 0.0, -500.0)
        assert math.isfinite(r.flight_path_angle_deg)
        assert r.vs_for_3deg == pytest.approx(101.27 * 1.0 * math.tan(math.radians(3.0)))
