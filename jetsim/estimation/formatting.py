"""
Duration formatting.
"""

from __future__ import annotations

import math


def format_time(minutes: float) -> str:
    """
    Format fractional minutes as HH:MM:SS.

    Rounds to the nearest second first (halves round up). Hours are not
    wrapped and use at least two digits.
    """
    total_seconds = math.floor(minutes * 60 + 0.5)
    hours, remainder = divmod(total_seconds, 3600)
    mins, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{mins:02d}:{seconds:02d}"


def format_time_difference(calculated: float, reference: float) -> str:
    """Signed difference in minutes, e.g. '+1.23 min'."""
    diff = calculated - reference
    sign = "+" if diff >= 0 else ""
    return f"{sign}{diff:.2f} min"
