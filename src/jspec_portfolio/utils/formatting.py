"""Display formatting helpers."""

import math
from datetime import date
from typing import Optional


def format_time(seconds: float) -> str:
    """Format a playback clock value as m:ss.

    Unknown or invalid values (NaN, negative) render as 0:00.
    """
    if seconds is None or math.isnan(seconds) or seconds < 0:
        seconds = 0
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def format_date(value: date) -> str:
    """Format a project date, e.g. 15 Jan 2022."""
    return f"{value.day} {value.strftime('%b %Y')}"


def format_date_range(start: date, end: Optional[date], ongoing_label: str = "Ongoing") -> str:
    """Format a project's date span, open-ended when there is no end date."""
    if end is None:
        return f"{format_date(start)} - {ongoing_label}"
    return f"{format_date(start)} - {format_date(end)}"
