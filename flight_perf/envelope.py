"""Flight envelope margins."""

from __future__ import annotations

import logging
import math

from .domain import EnvelopeReport
from .units import DEG_TO_RAD

logger = logging.getLogger(__name__)

HUNDRED_PERCENT = 100.0


def load_factor(bank_deg: float) -> float:
    """Load factor in a coordinated level turn, n = 1 / cos(bank)."""
    return 1.0 / math.cos(bank_deg * DEG_TO_RAD)


def analyze_envelope(
    bank_deg: float,
    ias_kts: float,
    mach: float,
    vso_kts: float,
    vne_kts: float,
    mmo: float,
) -> EnvelopeReport:
    """
    Margins (%) to stall, VMO and MMO at the current bank angle.

    Stall speed rises with sqrt(n) in the turn. Corner speed is the
    Vs * sqrt(2) rule of thumb, not a certified figure.

    Near 90 deg of bank the load factor blows up; the report is still
    returned and flagged through EnvelopeReport.is_degenerate.
    """
    n = load_factor(bank_deg)
    vs_actual = vso_kts * math.sqrt(n) if n >= 0.0 else float("nan")

    stall_margin = (ias_kts - vs_actual) / vs_actual * HUNDRED_PERCENT
    vmo_margin = (vne_kts - ias_kts) / vne_kts * HUNDRED_PERCENT
    mmo_margin = (mmo - mach) / mmo * HUNDRED_PERCENT

    report = EnvelopeReport(
        stall_margin_pct=stall_margin,
        vmo_margin_pct=vmo_margin,
        mmo_margin_pct=mmo_margin,
        min_margin_pct=min(stall_margin, vmo_margin, mmo_margin),
        load_factor=n,
        corner_speed_kts=vs_actual * math.sqrt(2.0),
    )
    if report.is_degenerate:
        logger.warning("Degenerate envelope at %.1f deg bank (n=%.3g)", bank_deg, n)
    return report
