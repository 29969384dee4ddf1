"""
Flight Performance - MFD calculators

Converts raw aircraft state (airspeeds, headings, bank angle, altitude,
vertical speed) into the derived figures shown on a simulated
multi-function display: wind components and gust factor, envelope
margins, specific energy, glide reach, turn performance, density altitude
and VNAV guidance.
"""

from .domain import (
    AggregateReport,
    AircraftLimits,
    EnergyReport,
    EnergyTrend,
    EnvelopeReport,
    FlightState,
    GlideReport,
    Outcome,
    Result,
    Vector2D,
    WindReport,
)
from .history import SampleHistory, seed_synthetic_history
from .nav import normalize_angle
from .wind import resolve_wind, gust_factor, wind_components
from .envelope import analyze_envelope
from .energy import analyze_energy
from .glide import analyze_glide
from .analyze import analyze
from .report import report_to_dict, report_to_json, report_to_frame, format_report
from .turn import turn_performance
from .density import density_altitude
from .vnav import vnav_guidance
from .render import make_plot_figure

__all__ = [
    # Domain models
    "AggregateReport",
    "AircraftLimits",
    "EnergyReport",
    "EnergyTrend",
    "EnvelopeReport",
    "FlightState",
    "GlideReport",
    "Outcome",
    "Result",
    "Vector2D",
    "WindReport",
    # History
    "SampleHistory",
    "seed_synthetic_history",
    # Analyzers
    "normalize_angle",
    "resolve_wind",
    "gust_factor",
    "wind_components",
    "analyze_envelope",
    "analyze_energy",
    "analyze_glide",
    # Pipeline
    "analyze",
    # Serialization
    "report_to_dict",
    "report_to_json",
    "report_to_frame",
    "format_report",
    # Sibling calculators
    "turn_performance",
    "density_altitude",
    "vnav_guidance",
    # Visualization
    "make_plot_figure",
]

__version__ = "0.1.0"
