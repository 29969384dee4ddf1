"""
Command-line front end for the flight performance calculators.

How to run:
flight-perf flight 150 140 90 85 150 0.3 10000 5000 500 1000 0 60 200 0.8
flight-perf wind 90 85 270 15
flight-perf turn 250 25 90
flight-perf density 5000 25 150 170
flight-perf vnav 35000 10000 100 450 -1500

The exit code is the Outcome value (0 on success).
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from .analyze import analyze
from .density import density_altitude
from .domain import AircraftLimits, FlightState, Outcome, Result
from .history import SampleHistory, seed_synthetic_history
from .report import format_report, report_to_frame, report_to_json, to_json_text
from .turn import turn_performance
from .vnav import vnav_guidance
from .wind import wind_components

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

FLIGHT_ARGS = [
    ("tas", "True airspeed (kt)"),
    ("gs", "Groundspeed (kt)"),
    ("heading", "Heading (deg)"),
    ("track", "Ground track (deg)"),
    ("ias", "Indicated airspeed (kt)"),
    ("mach", "Mach number"),
    ("altitude", "Altitude (ft)"),
    ("agl", "Height above ground (ft)"),
    ("vs", "Vertical speed (fpm)"),
    ("weight", "Weight (kg)"),
    ("bank", "Bank angle (deg)"),
    ("vso", "Stall speed at 1 g (kt)"),
    ("vne", "Never-exceed speed (kt)"),
    ("mmo", "Max operating Mach"),
]
WIND_ARGS = [
    ("track", "Ground track (deg true)"),
    ("heading", "Aircraft heading (deg)"),
    ("wind_dir", "Wind direction FROM (deg)"),
    ("wind_speed", "Wind speed (kt)"),
]
TURN_ARGS = [
    ("tas", "True airspeed (kt)"),
    ("bank", "Bank angle (deg)"),
    ("course_change", "Course change (deg)"),
]
DENSITY_ARGS = [
    ("pressure_alt", "Pressure altitude (ft)"),
    ("oat", "Outside air temperature (C)"),
    ("ias", "Indicated airspeed (kt)"),
    ("tas", "True airspeed (kt)"),
]
VNAV_ARGS = [
    ("current_alt", "Current altitude (ft)"),
    ("target_alt", "Target altitude (ft)"),
    ("distance", "Distance to constraint (nm)"),
    ("groundspeed", "Groundspeed (kt)"),
    ("current_vs", "Current vertical speed (fpm)"),
]


def configure_logging(level: int = logging.WARNING) -> None:
    """Single stderr handler on the root logger; stdout stays reserved for reports."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def parse_float(text: str) -> Result[float]:
    try:
        return Result.success(float(text))
    except ValueError:
        return Result.failure(Outcome.PARSE_FAILED, f"not a number: {text!r}")


def parse_args(raw: argparse.Namespace, names: Sequence[str]) -> Result[dict[str, float]]:
    values: dict[str, float] = {}
    for name in names:
        parsed = parse_float(getattr(raw, name))
        if not parsed.ok:
            return Result.failure(parsed.outcome, f"{name}: {parsed.message}")
        values[name] = parsed.value
    return Result.success(values)


class _ArgumentParser(argparse.ArgumentParser):
    """Argparse exits with 2 on usage errors; report INVALID_ARGS instead."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(int(Outcome.INVALID_ARGS), f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="flight-perf", description="Flight performance calculators for a simulated MFD.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    sub = parser.add_subparsers(dest="command", required=True, parser_class=_ArgumentParser)

    def add(name: str, help_text: str, args: list[tuple[str, str]]) -> argparse.ArgumentParser:
        p = sub.add_parser(name, help=help_text)
        for arg, arg_help in args:
            # parsed later so that bad numbers map to PARSE_FAILED
            p.add_argument(arg, type=str, help=arg_help)
        return p

    flight = add("flight", "Aggregate wind / envelope / energy / glide report", FLIGHT_ARGS)
    flight.add_argument("--history", nargs="+", metavar="IAS", help="Recent IAS samples, oldest first (default: simulated around IAS)")
    flight.add_argument("--format", choices=["json", "text", "csv"], default="json", help="Output format")

    add("wind", "Wind components from a known wind", WIND_ARGS)
    add("turn", "Turn radius, rate and lead distance", TURN_ARGS)
    add("density", "Density altitude and air density ratio", DENSITY_ARGS)
    add("vnav", "Vertical navigation to an altitude constraint", VNAV_ARGS)
    return parser


def _emit(obj) -> None:
    sys.stdout.write(to_json_text(dataclasses.asdict(obj)))


def run_flight(raw: argparse.Namespace) -> Outcome:
    parsed = parse_args(raw, [name for name, _ in FLIGHT_ARGS])
    if not parsed.ok:
        logger.error(parsed.message)
        return parsed.outcome
    v = parsed.value

    history = SampleHistory()
    if raw.history:
        for text in raw.history:
            sample = parse_float(text)
            if not sample.ok:
                logger.error("history: %s", sample.message)
                return sample.outcome
            history.append(sample.value)
    else:
        seed_synthetic_history(history, v["ias"])

    state = FlightState(
        tas_kts=v["tas"], gs_kts=v["gs"], heading_deg=v["heading"], track_deg=v["track"],
        ias_kts=v["ias"], mach=v["mach"], altitude_ft=v["altitude"], agl_ft=v["agl"],
        vs_fpm=v["vs"], bank_deg=v["bank"], weight_kg=v["weight"],
    )
    limits = AircraftLimits(name="command line", vso_kts=v["vso"], vne_kts=v["vne"], mmo=v["mmo"])

    result = analyze(state, limits, history)
    if not result.ok:
        logger.error("Flight calculation failed: %s", result.message)
        return result.outcome

    if raw.format == "text":
        sys.stdout.write(format_report(result.value))
    elif raw.format == "csv":
        sys.stdout.write(report_to_frame(result.value).to_csv(index=False))
    else:
        sys.stdout.write(report_to_json(result.value))
    return Outcome.SUCCESS


def run_wind(raw: argparse.Namespace) -> Outcome:
    parsed = parse_args(raw, [name for name, _ in WIND_ARGS])
    if not parsed.ok:
        logger.error(parsed.message)
        return parsed.outcome
    v = parsed.value
    result = wind_components(v["track"], v["heading"], v["wind_dir"], v["wind_speed"])
    if not result.ok:
        logger.error("Wind calculation failed: %s", result.message)
        return result.outcome
    _emit(result.value)
    return Outcome.SUCCESS


def run_turn(raw: argparse.Namespace) -> Outcome:
    parsed = parse_args(raw, [name for name, _ in TURN_ARGS])
    if not parsed.ok:
        logger.error(parsed.message)
        return parsed.outcome
    v = parsed.value
    result = turn_performance(v["tas"], v["bank"], v["course_change"])
    if not result.ok:
        logger.error("Error: %s", result.message)
        return result.outcome
    _emit(result.value)
    return Outcome.SUCCESS


def run_density(raw: argparse.Namespace) -> Outcome:
    parsed = parse_args(raw, [name for name, _ in DENSITY_ARGS])
    if not parsed.ok:
        logger.error(parsed.message)
        return parsed.outcome
    v = parsed.value
    _emit(density_altitude(v["pressure_alt"], v["oat"], v["ias"], v["tas"]))
    return Outcome.SUCCESS


def run_vnav(raw: argparse.Namespace) -> Outcome:
    parsed = parse_args(raw, [name for name, _ in VNAV_ARGS])
    if not parsed.ok:
        logger.error(parsed.message)
        return parsed.outcome
    v = parsed.value
    _emit(vnav_guidance(v["current_alt"], v["target_alt"], v["distance"], v["groundspeed"], v["current_vs"]))
    return Outcome.SUCCESS


COMMANDS = {
    "flight": run_flight,
    "wind": run_wind,
    "turn": run_turn,
    "density": run_density,
    "vnav": run_vnav,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose >= 2:
        configure_logging(logging.DEBUG)
    elif args.verbose == 1:
        configure_logging(logging.INFO)
    else:
        configure_logging(logging.WARNING)

    return int(COMMANDS[args.command](args))


if __name__ == "__main__":
    sys.exit(main())
