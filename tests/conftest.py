"""Shared pytest fixtures for flight_perf tests"""

import logging

import pytest

from flight_perf.domain import AircraftLimits, FlightState
from flight_perf.history import SampleHistory


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI installs its own root handler; undo it after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture
def cruise_state():
    """Reference cruise scenario: 150 kt TAS on heading 090, tracking 085."""
    return FlightState(
        tas_kts=150.0,
        gs_kts=140.0,
        heading_deg=90.0,
        track_deg=85.0,
        ias_kts=150.0,
        mach=0.3,
        altitude_ft=10000.0,
        agl_ft=5000.0,
        vs_fpm=500.0,
        bank_deg=0.0,
    )


@pytest.fixture
def limits():
    return AircraftLimits(name="Test", vso_kts=60.0, vne_kts=200.0, mmo=0.8)


@pytest.fixture
def steady_history():
    """Full history of identical IAS samples (no gusts)."""
    history = SampleHistory(capacity=20)
    history.extend([150.0] * 20)
    return history


@pytest.fixture
def flight_argv():
    """Positional arguments for the reference scenario, in command-line order."""
    return [
        "flight", "150", "140", "90", "85", "150", "0.3", "10000", "5000", "500",
        "1000", "0", "60", "200", "0.8",
    ]
