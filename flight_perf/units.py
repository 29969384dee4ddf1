"""Unit conversions and physical constants shared by the calculators."""

from __future__ import annotations

import math

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

GRAVITY_MS2 = 9.80665
KTS_TO_MS = 0.514444
FT_TO_M = 0.3048
M_TO_FT = 3.28084
NM_TO_FT = 6076.12
M_PER_NM = 1852.0

ANGLE_WRAP_DEG = 360.0
HALF_CIRCLE_DEG = 180.0

# VS (fpm) per knot of groundspeed per unit of tan(flight path angle)
FPM_PER_KT_TAN = 101.27
