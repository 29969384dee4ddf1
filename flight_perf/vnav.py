"""Vertical navigation guidance towards an altitude constraint."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .units import DEG_TO_RAD, FPM_PER_KT_TAN, NM_TO_FT, RAD_TO_DEG

STANDARD_PATH_DEG = 3.0

# Floors that keep the geometry away from division by zero
MIN_DISTANCE_NM = 0.01
MIN_GROUNDSPEED_KTS = 1.0
MIN_VS_FOR_TIME_FPM = 1.0
MIN_ALT_CHANGE_FT = 1.0

INFINITE_TIME_MIN = 999.9
PER_THOUSAND_FT = 1000.0


@dataclass(frozen=True)
class VnavReport:
    altitude_to_lose_ft: float     # current - target (negative when climbing)
    flight_path_angle_deg: float   # + climb, - descent
    required_vs_fpm: float
    tod_distance_nm: float         # distance needed on a 3 deg path
    time_to_constraint_min: float  # at the current VS
    distance_per_1000ft: float
    vs_for_3deg: float
    is_descent: bool


def vnav_guidance(
    current_alt_ft: float,
    target_alt_ft: float,
    distance_nm: float,
    groundspeed_kts: float,
    current_vs_fpm: float,
) -> VnavReport:
    """
    Path angle and vertical speed needed to meet an altitude constraint.

    Uses VS = 101.27 * GS * tan(gamma). Distance and groundspeed are floored
    so that a constraint overhead or a stopped aircraft still gives numbers.
    """
    altitude_change = target_alt_ft - current_alt_ft
    is_descent = altitude_change < 0.0

    distance = max(distance_nm, MIN_DISTANCE_NM)
    groundspeed = max(groundspeed_kts, MIN_GROUNDSPEED_KTS)

    gamma = math.atan(altitude_change / (distance * NM_TO_FT))
    required_vs = FPM_PER_KT_TAN * groundspeed * math.tan(gamma)

    tan_3deg = math.tan(STANDARD_PATH_DEG * DEG_TO_RAD)
    abs_change = abs(altitude_change)
    tod_distance = abs_change / (NM_TO_FT * tan_3deg)
    vs_3deg = FPM_PER_KT_TAN * groundspeed * tan_3deg

    if abs(current_vs_fpm) > MIN_VS_FOR_TIME_FPM:
        time_to_constraint = altitude_change / current_vs_fpm
    else:
        time_to_constraint = INFINITE_TIME_MIN

    if abs_change > MIN_ALT_CHANGE_FT:
        per_thousand = distance * PER_THOUSAND_FT / abs_change
    else:
        per_thousand = 0.0

    return VnavReport(
        altitude_to_lose_ft=-altitude_change,
        flight_path_angle_deg=gamma * RAD_TO_DEG,
        required_vs_fpm=required_vs,
        tod_distance_nm=tod_distance,
        time_to_constraint_min=time_to_constraint,
        distance_per_1000ft=per_thousand,
        vs_for_3deg=vs_3deg if is_descent else -vs_3deg,
        is_descent=is_descent,
    )
