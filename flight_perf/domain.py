from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Generic, Optional, TypeVar

import numpy as np


# -----------------------------
# Outcomes
# -----------------------------
class Outcome(IntEnum):
    """Outcome of a fallible calculation. The value doubles as the CLI exit code."""
    SUCCESS = 0
    INVALID_ARGS = 1
    PARSE_FAILED = 2
    CALCULATION_FAILED = 5
    ILLEGAL_VALUE = 6


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    outcome: Outcome
    value: Optional[T] = None  # only set on SUCCESS
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(Outcome.SUCCESS, value)

    @classmethod
    def failure(cls, outcome: Outcome, message: str) -> "Result[T]":
        if outcome is Outcome.SUCCESS:
            raise ValueError("failure() needs a non-success outcome")
        return cls(outcome, None, message)


# -----------------------------
# Configuration / "Aircraft Limits"
# -----------------------------
@dataclass(frozen=True)
class AircraftLimits:
    name: str = "Generic GA"
    vso_kts: float = 60.0   # stall speed at 1 g
    vne_kts: float = 200.0  # never-exceed speed
    mmo: float = 0.8        # max operating Mach


@dataclass(frozen=True)
class FlightState:
    """One snapshot of raw aircraft state fed to the aggregator."""
    tas_kts: float
    gs_kts: float
    heading_deg: float
    track_deg: float
    ias_kts: float
    mach: float
    altitude_ft: float
    agl_ft: float
    vs_fpm: float
    bank_deg: float = 0.0
    weight_kg: float = 0.0  # accepted for input compatibility, no formula uses it


# -----------------------------
# Vectors
# -----------------------------
@dataclass(frozen=True)
class Vector2D:
    x: float  # east
    y: float  # north

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def magnitude(self) -> float:
        return float(np.hypot(self.x, self.y))


# -----------------------------
# Reports
# -----------------------------
MAX_MEANINGFUL_LOAD_FACTOR = 10.0


@dataclass(frozen=True)
class WindReport:
    speed_kts: float
    direction_from: float  # deg, where the wind comes FROM, [0, 360)
    headwind: float
    crosswind: float       # + = from the right
    gust_factor: float     # std / mean of the IAS history


@dataclass(frozen=True)
class EnvelopeReport:
    stall_margin_pct: float
    vmo_margin_pct: float
    mmo_margin_pct: float
    min_margin_pct: float
    load_factor: float
    corner_speed_kts: float

    @property
    def is_degenerate(self) -> bool:
        # bank at or past 90 deg: margins no longer describe a flyable state
        return not np.isfinite(self.load_factor) or not (1.0 <= self.load_factor <= MAX_MEANINGFUL_LOAD_FACTOR)


class EnergyTrend(Enum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


@dataclass(frozen=True)
class EnergyReport:
    specific_energy_ft: float
    energy_rate_kts: float
    trend: EnergyTrend


@dataclass(frozen=True)
class GlideReport:
    still_air_range_nm: float
    wind_adjusted_range_nm: float
    glide_ratio: float
    best_glide_speed_kts: float


@dataclass(frozen=True)
class AggregateReport:
    # field order is the serialization order
    wind: WindReport
    envelope: EnvelopeReport
    energy: EnergyReport
    glide: GlideReport
