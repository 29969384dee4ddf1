"""Wind triangle resolution, gust statistics and known-wind components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .domain import Outcome, Result, WindReport
from .nav import bearing_vector, fold_signed, normalize_angle, vector_bearing_deg

logger = logging.getLogger(__name__)

MIN_SAMPLES_FOR_GUST = 2


def gust_factor(samples: np.ndarray) -> float:
    """
    Gust factor of an airspeed history: population std / mean.

    Fewer than two samples give 0.0. A non-positive mean (a parked or dead
    channel) also gives 0.0, since there is no airflow to be gusty.
    """
    samples = np.asarray(samples, dtype=float)
    if len(samples) < MIN_SAMPLES_FOR_GUST:
        return 0.0

    mean = float(np.mean(samples))
    if mean <= 0.0:
        logger.warning("Gust factor undefined for mean airspeed %.3f kt; reporting 0", mean)
        return 0.0

    std = float(np.std(samples))  # ddof=0, population variance
    return std / mean


def resolve_wind(
    tas_kts: float,
    gs_kts: float,
    heading_deg: float,
    track_deg: float,
    ias_samples: np.ndarray,
) -> Result[WindReport]:
    """
    Solve the wind triangle from air and ground velocity.

    The air vector (TAS along heading) minus the ground vector (GS along
    track) points to where the wind comes from. Components are taken
    relative to the track:
        headwind  = -speed * cos(rel)
        crosswind =  speed * sin(rel)   (+ = from the right)

    Args:
        tas_kts: True airspeed
        gs_kts: Groundspeed
        heading_deg: Aircraft heading (compass)
        track_deg: Ground track (compass)
        ias_samples: Snapshot of recent IAS readings for the gust factor

    Returns:
        Result wrapping a WindReport, or CALCULATION_FAILED when the wind
        vector or one of its angles is not finite.
    """
    air = bearing_vector(tas_kts, heading_deg)
    ground = bearing_vector(gs_kts, track_deg)
    wind_vec = air - ground

    speed = wind_vec.magnitude()
    if not np.isfinite(speed):
        return Result.failure(Outcome.CALCULATION_FAILED, f"wind speed is not finite (TAS={tas_kts!r}, GS={gs_kts!r})")

    direction = normalize_angle(vector_bearing_deg(wind_vec))
    if not direction.ok:
        return Result.failure(direction.outcome, direction.message)

    relative = normalize_angle(direction.value - track_deg)
    if not relative.ok:
        return Result.failure(relative.outcome, relative.message)

    rel_rad = np.deg2rad(fold_signed(relative.value))

    report = WindReport(
        speed_kts=speed,
        direction_from=direction.value,
        headwind=float(-speed * np.cos(rel_rad)),
        crosswind=float(speed * np.sin(rel_rad)),
        gust_factor=gust_factor(ias_samples),
    )
    logger.debug("Wind resolved: %s", report)
    return Result.success(report)


# -----------------------------
# Known-wind components
# -----------------------------
WIND_CORRECTION_ANGLE_UNSOLVED = 0.0


@dataclass(frozen=True)
class WindComponents:
    headwind: float     # -speed * cos(relative wind angle)
    crosswind: float    # + = from the right
    total_wind: float
    wca: float          # wind correction angle, not solved (always 0)
    drift: float        # track - heading, (-180, 180]


def wind_components(track_deg: float, heading_deg: float, wind_dir_deg: float, wind_speed_kts: float) -> Result[WindComponents]:
    """Split a reported wind (direction FROM, speed) into track-relative components."""
    track = normalize_angle(track_deg)
    heading = normalize_angle(heading_deg)
    wind_dir = normalize_angle(wind_dir_deg)
    for r in (track, heading, wind_dir):
        if not r.ok:
            return Result.failure(r.outcome, r.message)

    drift = normalize_angle(track.value - heading.value)
    relative = normalize_angle(wind_dir.value - track.value)
    for r in (drift, relative):
        if not r.ok:
            return Result.failure(r.outcome, r.message)

    rel_rad = np.deg2rad(fold_signed(relative.value))
    return Result.success(
        WindComponents(
            headwind=float(-wind_speed_kts * np.cos(rel_rad)),
            crosswind=float(wind_speed_kts * np.sin(rel_rad)),
            total_wind=float(wind_speed_kts),
            wca=WIND_CORRECTION_ANGLE_UNSOLVED,
            drift=fold_signed(drift.value),
        )
    )
