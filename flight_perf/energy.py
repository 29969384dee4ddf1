"""Specific energy state."""

from __future__ import annotations

from .domain import EnergyReport, EnergyTrend
from .units import FPM_PER_KT_TAN, FT_TO_M, GRAVITY_MS2, KTS_TO_MS, M_TO_FT

ENERGY_TREND_THRESHOLD_FPM = 50.0


def energy_trend(vs_fpm: float) -> EnergyTrend:
    if vs_fpm > ENERGY_TREND_THRESHOLD_FPM:
        return EnergyTrend.INCREASING
    if vs_fpm < -ENERGY_TREND_THRESHOLD_FPM:
        return EnergyTrend.DECREASING
    return EnergyTrend.STABLE


def analyze_energy(tas_kts: float, altitude_ft: float, vs_fpm: float) -> EnergyReport:
    """
    Specific energy Es = h + V^2 / (2g), as a height in feet.

    The energy rate is VS scaled by a fixed factor, a proxy rather than a
    true dEs/dt.
    """
    v_ms = tas_kts * KTS_TO_MS
    h_m = altitude_ft * FT_TO_M
    kinetic_m = (v_ms * v_ms) / (2.0 * GRAVITY_MS2)

    return EnergyReport(
        specific_energy_ft=(h_m + kinetic_m) * M_TO_FT,
        energy_rate_kts=vs_fpm / FPM_PER_KT_TAN,
        trend=energy_trend(vs_fpm),
    )
