"""Shared helpers: logging, formatting and state observation."""

from .formatting import format_time, format_date, format_date_range
from .logging_config import configure_logging, ProgressFormatter
from .observable import Observable

__all__ = [
    "format_time",
    "format_date",
    "format_date_range",
    "configure_logging",
    "ProgressFormatter",
    "Observable",
]
