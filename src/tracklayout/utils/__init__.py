"""Utility helpers."""

from tracklayout.utils.constants import FULL_TURN, QUARTER_PI, SQRT2
from tracklayout.utils.logging import configure_logging

__all__ = ["FULL_TURN", "QUARTER_PI", "SQRT2", "configure_logging"]
