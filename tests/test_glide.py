"""Tests for glide reach in glide.py"""

import pytest

from flight_perf.glide import analyze_glide


class TestAnalyzeGlide:
    """Tests for the analyze_glide function."""

    def test_still_air_range(self):
        """5000 ft at 12:1 is about 9.87 nm."""
        glide = analyze_glide(5000.0, 150.0, 0.0)
        assert glide.still_air_range_nm == pytest.approx(5000.0 * 12.0 / 6076.12)
        assert glide.still_air_range_nm == pytest.approx(9.87, abs=0.01)

    def test_no_wind_keeps_range(self):
        glide = analyze_glide(5000.0, 150.0, 0.0)
        assert glide.wind_adjusted_range_nm == glide.still_air_range_nm

    def test_linear_wind_correction(self):
        """range * (1 - headwind / TAS)"""
        glide = analyze_glide(5000.0, 150.0, 30.0)
        assert glide.wind_adjusted_range_nm == pytest.approx(glide.still_air_range_nm * 0.8)

    def test_negative_headwind_extends_range(self):
        glide = analyze_glide(5000.0, 150.0, -30.0)
        assert glide.wind_adjusted_range_nm > glide.still_air_range_nm

    def test_not_clamped(self):
        """Headwind above TAS drives the estimate below zero."""
        glide = analyze_glide(5000.0, 100.0, 150.0)
        assert glide.wind_adjusted_range_nm < 0.0

    def test_fixed_constants(self):
        glide = analyze_glide(1000.0, 90.0, 5.0)
        assert glide.glide_ratio == 12.0
        assert glide.best_glide_speed_kts == pytest.approx(78.0)

    def test_idempotent(self):
        assert analyze_glide(3500.0, 110.0, 12.5) == analyze_glide(3500.0, 110.0, 12.5)
