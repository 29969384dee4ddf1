"""Tests for the energy state in energy.py"""

import pytest

from flight_perf.domain import EnergyTrend
from flight_perf.energy import analyze_energy, energy_trend


class TestEnergyTrend:
    """Tests for the trend thresholds (+/- 50 fpm)."""

    @pytest.mark.parametrize(
        "vs, expected",
        [
            (50.0, EnergyTrend.STABLE),
            (50.1, EnergyTrend.INCREASING),
            (-50.0, EnergyTrend.STABLE),
            (-50.1, EnergyTrend.DECREASING),
            (0.0, EnergyTrend.STABLE),
            (500.0, EnergyTrend.INCREASING),
            (-1500.0, EnergyTrend.DECREASING),
        ],
    )
    def test_boundaries(self, vs, expected):
        assert energy_trend(vs) is expected


class TestAnalyzeEnergy:
    """Tests for the analyze_energy function."""

    def test_specific_energy(self):
        """Es = h + V^2 / 2g, computed in metres, reported in feet."""
        energy = analyze_energy(150.0, 10000.0, 500.0)
        v = 150.0 * 0.514444
        expected_m = 10000.0 * 0.3048 + v * v / (2.0 * 9.80665)
        assert energy.specific_energy_ft == pytest.approx(expected_m * 3.28084)

    def test_zero_speed_is_altitude(self):
        """No kinetic energy: specific energy is just altitude (unit round trip)."""
        energy = analyze_energy(0.0, 8000.0, 0.0)
        assert energy.specific_energy_ft == pytest.approx(8000.0, rel=1e-5)

    def test_energy_rate(self):
        assert analyze_energy(150.0, 10000.0, 500.0).energy_rate_kts == pytest.approx(500.0 / 101.27)
        assert analyze_energy(150.0, 10000.0, -1013.0).energy_rate_kts == pytest.approx(-1013.0 / 101.27)

    def test_trend_in_report(self):
        assert analyze_energy(150.0, 10000.0, 500.0).trend is EnergyTrend.INCREASING

    def test_idempotent(self):
        assert analyze_energy(123.0, 4500.0, -300.0) == analyze_energy(123.0, 4500.0, -300.0)
