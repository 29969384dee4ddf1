"""Turn performance: radius, rate, lead distance and standard-rate bank."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .domain import Outcome, Result
from .units import DEG_TO_RAD, GRAVITY_MS2, KTS_TO_MS, M_PER_NM, M_TO_FT, RAD_TO_DEG

STANDARD_RATE_DPS = 3.0

# Sentinels reported for a wings-level (infinite radius) "turn"
INFINITE_RADIUS_NM = 999.9
INFINITE_RADIUS_FT = 999900.0
INFINITE_TIME_S = 999.9

MIN_TAN_BANK = 0.001
MIN_TURN_RATE_DPS = 0.01
MAX_BANK_DEG = 90.0


@dataclass(frozen=True)
class TurnReport:
    radius_nm: float
    radius_ft: float
    turn_rate_dps: float
    lead_distance_nm: float   # distance before the new course to start the roll-out
    lead_distance_ft: float
    time_to_turn_sec: float
    load_factor: float
    standard_rate_bank: float  # bank for a 3 deg/s turn at this TAS


def turn_performance(tas_kts: float, bank_deg: float, course_change_deg: float) -> Result[TurnReport]:
    """
    Turn geometry for a coordinated level turn.

        R     = V^2 / (g tan(bank))
        omega = g tan(bank) / V
        lead  = R tan(course_change / 2)

    Args:
        tas_kts: True airspeed, must be positive
        bank_deg: Bank angle, 0..90
        course_change_deg: Heading change to fly

    Returns:
        Result wrapping a TurnReport, or ILLEGAL_VALUE for a non-positive
        TAS or a bank outside 0..90.
    """
    if not tas_kts > 0.0:
        return Result.failure(Outcome.ILLEGAL_VALUE, f"TAS must be positive, got {tas_kts}")
    if not 0.0 <= bank_deg <= MAX_BANK_DEG:
        return Result.failure(Outcome.ILLEGAL_VALUE, f"bank must be between 0 and 90 degrees, got {bank_deg}")

    v_ms = tas_kts * KTS_TO_MS
    phi = bank_deg * DEG_TO_RAD
    load_factor = 1.0 / math.cos(phi)

    tan_phi = math.tan(phi)
    if abs(tan_phi) < MIN_TAN_BANK:
        # wings level
        radius_nm, radius_ft = INFINITE_RADIUS_NM, INFINITE_RADIUS_FT
        turn_rate = 0.0
        lead_nm = lead_ft = 0.0
        time_to_turn = INFINITE_TIME_S
    else:
        radius_m = (v_ms * v_ms) / (GRAVITY_MS2 * tan_phi)
        radius_nm = radius_m / M_PER_NM
        radius_ft = radius_m * M_TO_FT

        turn_rate = (GRAVITY_MS2 * tan_phi) / v_ms * RAD_TO_DEG

        lead_m = radius_m * math.tan(course_change_deg * DEG_TO_RAD / 2.0)
        lead_nm = lead_m / M_PER_NM
        lead_ft = lead_m * M_TO_FT

        if abs(turn_rate) > MIN_TURN_RATE_DPS:
            time_to_turn = course_change_deg / turn_rate
        else:
            time_to_turn = INFINITE_TIME_S

    std_rate_rad_s = STANDARD_RATE_DPS * DEG_TO_RAD
    standard_rate_bank = math.atan((std_rate_rad_s * v_ms) / GRAVITY_MS2) * RAD_TO_DEG

    return Result.success(
        TurnReport(
            radius_nm=radius_nm,
            radius_ft=radius_ft,
            turn_rate_dps=turn_rate,
            lead_distance_nm=lead_nm,
            lead_distance_ft=lead_ft,
            time_to_turn_sec=time_to_turn,
            load_factor=load_factor,
            standard_rate_bank=standard_rate_bank,
        )
    )
