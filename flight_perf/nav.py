import numpy as np

from .domain import Outcome, Result, Vector2D
from .units import ANGLE_WRAP_DEG, HALF_CIRCLE_DEG


def normalize_angle(angle_deg: float) -> Result[float]:
    """
    Wrap an angle into [0, 360) with a true (divisor-signed) modulo.

    -10 -> 350, 725 -> 5. Non-finite input cannot be wrapped and yields
    CALCULATION_FAILED.
    """
    wrapped = float(np.mod(angle_deg, ANGLE_WRAP_DEG)) if np.isfinite(angle_deg) else float("nan")
    if not np.isfinite(wrapped):
        return Result.failure(Outcome.CALCULATION_FAILED, f"cannot normalize angle {angle_deg!r}")

    if wrapped < 0.0:
        wrapped += ANGLE_WRAP_DEG
    # tiny negatives round up to exactly 360.0
    if wrapped >= ANGLE_WRAP_DEG:
        wrapped -= ANGLE_WRAP_DEG
    return Result.success(wrapped)


def fold_signed(angle_deg: float) -> float:
    """Fold an angle already in [0, 360) into (-180, 180]."""
    if angle_deg > HALF_CIRCLE_DEG:
        return angle_deg - ANGLE_WRAP_DEG
    return angle_deg


def bearing_vector(speed: float, bearing_deg: float) -> Vector2D:
    """
    Velocity vector for a compass bearing (0 = north, clockwise).
    sin -> east component, cos -> north component.
    """
    brg = np.deg2rad(bearing_deg)
    return Vector2D(x=float(speed * np.sin(brg)), y=float(speed * np.cos(brg)))


def vector_bearing_deg(vec: Vector2D) -> float:
    """Compass bearing of a vector in degrees, (-180, 180] before normalization."""
    return float(np.rad2deg(np.arctan2(vec.x, vec.y)))
