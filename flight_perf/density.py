"""Density altitude and air density ratio (ISA approximations)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

SEA_LEVEL_TEMP_C = 15.0
TEMP_LAPSE_C_PER_FT = 0.0019812
KELVIN_OFFSET = 273.15
DENSITY_ALT_FT_PER_C = 120.0
PRESSURE_ALT_CONSTANT = 6.8756e-6
PRESSURE_ALT_EXPONENT = 5.2559
MIN_IAS_FOR_RATIO_KTS = 10.0

# Outside these ranges the results are still computed, with a warning
MIN_ALTITUDE_FT = -2000.0
MAX_ALTITUDE_FT = 60000.0
MIN_TEMPERATURE_C = -60.0
MAX_TEMPERATURE_C = 60.0


@dataclass(frozen=True)
class DensityAltitudeReport:
    density_altitude_ft: float
    pressure_altitude_ft: float
    air_density_ratio: float       # sigma, rho / rho0
    temperature_deviation_c: float  # OAT - ISA
    performance_loss_pct: float
    eas_kts: float
    tas_to_ias_ratio: float
    pressure_ratio: float


def isa_temperature_c(pressure_altitude_ft: float) -> float:
    return SEA_LEVEL_TEMP_C - TEMP_LAPSE_C_PER_FT * pressure_altitude_ft


def pressure_ratio(pressure_altitude_ft: float) -> float:
    """NaN above the altitude where the ISA fit runs out (base below zero)."""
    base = 1.0 - PRESSURE_ALT_CONSTANT * pressure_altitude_ft
    with np.errstate(invalid="ignore"):
        return float(np.power(base, PRESSURE_ALT_EXPONENT))


def density_altitude_ft(pressure_altitude_ft: float, oat_c: float) -> float:
    """DA = PA + 120 * (OAT - ISA), good to about 1%."""
    return pressure_altitude_ft + DENSITY_ALT_FT_PER_C * (oat_c - isa_temperature_c(pressure_altitude_ft))


def density_ratio(pressure_altitude_ft: float, oat_c: float) -> float:
    """sigma = (P / P0) * (T0 / T)"""
    with np.errstate(divide="ignore", invalid="ignore"):
        temp_ratio = float(np.divide(SEA_LEVEL_TEMP_C + KELVIN_OFFSET, np.float64(oat_c + KELVIN_OFFSET)))
    return pressure_ratio(pressure_altitude_ft) * temp_ratio


def _eas(tas_kts: float, sigma: float) -> float:
    with np.errstate(invalid="ignore"):
        return float(tas_kts * np.sqrt(sigma))


def density_altitude(pressure_altitude_ft: float, oat_c: float, ias_kts: float, tas_kts: float) -> DensityAltitudeReport:
    if not MIN_ALTITUDE_FT <= pressure_altitude_ft <= MAX_ALTITUDE_FT:
        logger.warning("Pressure altitude %.0f ft outside typical range", pressure_altitude_ft)
    if not MIN_TEMPERATURE_C <= oat_c <= MAX_TEMPERATURE_C:
        logger.warning("Temperature %.1f C outside typical range", oat_c)

    sigma = density_ratio(pressure_altitude_ft, oat_c)

    return DensityAltitudeReport(
        density_altitude_ft=density_altitude_ft(pressure_altitude_ft, oat_c),
        pressure_altitude_ft=pressure_altitude_ft,
        air_density_ratio=sigma,
        temperature_deviation_c=oat_c - isa_temperature_c(pressure_altitude_ft),
        performance_loss_pct=(1.0 - sigma) * 100.0,
        eas_kts=_eas(tas_kts, sigma),
        tas_to_ias_ratio=tas_kts / ias_kts if ias_kts > MIN_IAS_FOR_RATIO_KTS else 1.0,
        pressure_ratio=pressure_ratio(pressure_altitude_ft),
    )
