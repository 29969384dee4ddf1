from __future__ import annotations

from .domain import AircraftLimits

# -----------------------------
# Preset aircraft limits
# -----------------------------
PRESET_AIRCRAFT: dict[str, AircraftLimits] = {
    "Generic GA": AircraftLimits(
        name="Generic GA",
        vso_kts=60.0,
        vne_kts=200.0,
        mmo=0.8,
    ),
    "C172": AircraftLimits(
        name="C172",
        vso_kts=48.0,
        vne_kts=163.0,
        mmo=0.3,   # not Mach-limited in practice; keeps the MMO margin meaningful
    ),
    "Light jet": AircraftLimits(
        name="Light jet",
        vso_kts=90.0,
        vne_kts=275.0,
        mmo=0.72,
    ),
}

DEFAULT_AIRCRAFT = "Generic GA"
