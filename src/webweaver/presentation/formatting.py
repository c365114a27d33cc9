"""Display formatting for raw numeric save fields."""
from __future__ import annotations

import math

_ZERO_PLAY_TIME = "00h 00m 00s"


def format_play_time(seconds: float | int | None) -> str:
    """Format a second count as ``HHh MMm SSs``; fractional seconds are dropped."""
    if seconds is None:
        return _ZERO_PLAY_TIME
    if seconds < 0:
        raise ValueError(f"play time must be non-negative, got {seconds!r}")
    total = math.floor(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}h {minutes:02d}m {secs:02d}s"


def format_number(value: float | int | None) -> str:
    """Group thousands with commas; None reads as zero."""
    return f"{value or 0:,}"


def format_percent(value: float | int | None) -> str:
    """Render a percentage with one decimal place."""
    return f"{value or 0:.1f}%"
