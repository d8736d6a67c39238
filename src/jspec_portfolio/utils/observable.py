"""Minimal publish/subscribe for component state."""

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    """Holds listeners and pushes state snapshots to them.

    Subclasses implement `snapshot()` and call `_notify()` after every
    state change. Listener failures are logged and do not stop delivery
    to the remaining listeners.
    """

    def __init__(self):
        self._listeners: List[Callable[[T], None]] = []

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> T:
        raise NotImplementedError

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error(f"State listener {listener!r} failed: {e}")
