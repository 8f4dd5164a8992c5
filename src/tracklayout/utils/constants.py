"""Geometric constants used across the library."""

import math

FULL_TURN: float = 2.0 * math.pi
QUARTER_PI: float = 0.25 * math.pi
SQRT2: float = math.sqrt(2.0)
