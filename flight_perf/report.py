"""Serialization of the aggregate report (JSON, flat table, MFD text)."""

from __future__ import annotations

import json
import math
from dataclasses import fields
from enum import Enum
from typing import Any

import pandas as pd

from .domain import AggregateReport

GROUPS = ("wind", "envelope", "energy", "glide")


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return float(value)


def report_to_dict(report: AggregateReport) -> dict[str, dict[str, Any]]:
    """Nested dict in stable group / field order."""
    out: dict[str, dict[str, Any]] = {}
    for group in GROUPS:
        sub = getattr(report, group)
        out[group] = {f.name: _plain(getattr(sub, f.name)) for f in fields(sub)}
    return out


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _finite_or_none(v) for k, v in value.items()}
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def to_json_text(data: dict[str, Any]) -> str:
    """
    Strict JSON, indented, with a trailing newline.

    NaN and infinities (degenerate bank, out-of-model atmosphere) become null.
    """
    return json.dumps(_finite_or_none(data), indent=2, allow_nan=False) + "\n"


def report_to_json(report: AggregateReport) -> str:
    return to_json_text(report_to_dict(report))


def report_to_frame(report: AggregateReport) -> pd.DataFrame:
    """One row per field: group, field, value."""
    rows = [
        {"group": group, "field": name, "value": value}
        for group, values in report_to_dict(report).items()
        for name, value in values.items()
    ]
    return pd.DataFrame(rows, columns=["group", "field", "value"])


def format_report(report: AggregateReport) -> str:
    """Aligned plain text, one block per group, as shown on the MFD page."""
    lines: list[str] = []
    for group, values in report_to_dict(report).items():
        lines.append(group.upper())
        width = max(len(name) for name in values)
        for name, value in values.items():
            shown = value if isinstance(value, str) else f"{value:.2f}"
            lines.append(f"  {name.ljust(width)}  {shown}")
    return "\n".join(lines) + "\n"
