"""Logging setup for the JSPEC portfolio site."""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(levelname)-5s | %(asctime)s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "gradio",
    "urllib3",
    "PIL",
    "asyncio",
)


class ProgressFormatter(logging.Formatter):
    """Formatter that shortens load-cycle records from simple_logger.

    Records carrying a `progress_type` attribute print as just the
    logger's last name segment and the message. Everything else falls
    back to the regular format.
    """

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "progress_type", None) is None:
            return super().format(record)
        module = record.name.rsplit(".", 1)[-1]
        return f"{module}: {record.getMessage()}"


def configure_logging(
    level: str = "INFO",
    format: Optional[str] = None,
    suppress_external: bool = True
) -> None:
    """Install a stdout handler on the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format: Format for regular records, or None for DEFAULT_FORMAT
        suppress_external: Raise NOISY_LOGGERS to WARNING
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProgressFormatter(format or DEFAULT_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if suppress_external:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
