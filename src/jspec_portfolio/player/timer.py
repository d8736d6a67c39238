"""Cancellable inactivity timer for the controls overlay."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ControlsTimer:
    """One pending callback at a time on the running event loop.

    Starting the timer replaces any pending callback. Must be used from
    within a running asyncio loop.
    """

    def __init__(self):
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self, delay: float, callback: Callable[[], None]) -> None:
        """(Re)start the countdown."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(max(0.0, delay), self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        callback()
