"""Glide reach estimate."""

from __future__ import annotations

from .domain import GlideReport
from .units import NM_TO_FT

# Typical general-aviation L/D, assumed rather than measured
TYPICAL_GLIDE_RATIO = 12.0
BEST_GLIDE_MULTIPLIER = 1.3
TYPICAL_VS_KTS = 60.0


def analyze_glide(agl_ft: float, tas_kts: float, headwind_kts: float) -> GlideReport:
    """
    Still-air and wind-adjusted glide range from height above ground.

    The wind correction is first order: range * (1 - headwind / TAS). It is
    not clamped, so strong winds can push it below zero or past the
    still-air range. Best glide speed comes from a reference stall speed,
    not the aircraft's own Vso.
    """
    still_air_nm = agl_ft * TYPICAL_GLIDE_RATIO / NM_TO_FT
    wind_effect = headwind_kts / tas_kts

    return GlideReport(
        still_air_range_nm=still_air_nm,
        wind_adjusted_range_nm=still_air_nm * (1.0 - wind_effect),
        glide_ratio=TYPICAL_GLIDE_RATIO,
        best_glide_speed_kts=BEST_GLIDE_MULTIPLIER * TYPICAL_VS_KTS,
    )
