"""Progress logging helpers for load cycles."""

import logging


def _log_progress(logger: logging.Logger, message: str, progress_type: str, level: int = logging.INFO):
    record = logger.makeRecord(
        logger.name, level, "", 0, message, (), None
    )
    record.progress_type = progress_type
    logger.handle(record)


def log_start(logger: logging.Logger, message: str):
    """Log the start of a task."""
    _log_progress(logger, f"🚀 {message}", "start")


def log_complete(logger: logging.Logger, message: str):
    """Log task completion."""
    _log_progress(logger, f"✅ {message}", "complete")


def log_failed(logger: logging.Logger, message: str):
    """Log task failure."""
    _log_progress(logger, f"❌ {message}", "failed", logging.ERROR)
