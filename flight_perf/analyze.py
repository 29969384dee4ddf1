"""Pipeline orchestration for the flight performance aggregate."""

from __future__ import annotations

import logging
import math

import numpy as np

from .domain import AggregateReport, AircraftLimits, FlightState, Outcome, Result
from .history import SampleHistory
from .wind import resolve_wind
from .envelope import analyze_envelope
from .energy import analyze_energy
from .glide import analyze_glide

logger = logging.getLogger(__name__)


# Wind geometry (GS, heading, track) is left to the angle normalizer,
# which reports non-finite values as CALCULATION_FAILED.
SCALAR_FIELDS = ("ias_kts", "mach", "altitude_ft", "agl_ft", "vs_fpm", "bank_deg", "weight_kg")


def validate_inputs(state: FlightState, limits: AircraftLimits) -> Result[None]:
    """
    Reject inputs that parse as numbers but make no physical sense.

    TAS, Vso, Vne and Mmo are divisors further down, so they must be
    strictly positive (NaN fails the check too).
    """
    positive = {
        "TAS": state.tas_kts,
        "Vso": limits.vso_kts,
        "Vne": limits.vne_kts,
        "Mmo": limits.mmo,
    }
    for name, value in positive.items():
        if not (value > 0.0 and math.isfinite(value)):
            return Result.failure(Outcome.ILLEGAL_VALUE, f"{name} must be positive and finite, got {value}")

    for name in SCALAR_FIELDS:
        value = getattr(state, name)
        if not math.isfinite(value):
            return Result.failure(Outcome.ILLEGAL_VALUE, f"{name} must be finite, got {value}")

    return Result.success(None)


def analyze(
    state: FlightState,
    limits: AircraftLimits,
    history: SampleHistory,
) -> Result[AggregateReport]:
    """
    Run the complete flight performance aggregate.

    Orchestrates:
    1. Validate inputs (state, limits and the IAS history)
    2. Resolve wind (with gust factor from a history snapshot)
    3. Envelope margins and energy state (independent of wind)
    4. Glide reach using the resolved headwind

    Args:
        state: Raw aircraft state
        limits: Aircraft limit speeds
        history: Recent IAS readings; only a snapshot copy is read

    Returns:
        Result wrapping the AggregateReport. Any failure aborts the whole
        aggregate, no partial report is produced.
    """
    checked = validate_inputs(state, limits)
    if not checked.ok:
        logger.debug("Rejected input: %s", checked.message)
        return Result.failure(checked.outcome, checked.message)

    samples = history.snapshot()
    if not np.isfinite(samples).all():
        logger.debug("Rejected IAS history with non-finite samples")
        return Result.failure(Outcome.ILLEGAL_VALUE, "IAS history contains non-finite samples")

    wind = resolve_wind(state.tas_kts, state.gs_kts, state.heading_deg, state.track_deg, samples)
    if not wind.ok:
        return Result.failure(wind.outcome, wind.message)

    envelope = analyze_envelope(
        state.bank_deg, state.ias_kts, state.mach,
        limits.vso_kts, limits.vne_kts, limits.mmo,
    )
    energy = analyze_energy(state.tas_kts, state.altitude_ft, state.vs_fpm)
    glide = analyze_glide(state.agl_ft, state.tas_kts, wind.value.headwind)

    logger.info(
        "Aggregate for %s: wind %.1f kt from %.0f, min margin %.1f%%, energy %s",
        limits.name, wind.value.speed_kts, wind.value.direction_from,
        envelope.min_margin_pct, energy.trend.value,
    )
    return Result.success(AggregateReport(wind=wind.value, envelope=envelope, energy=energy, glide=glide))
