"""Video viewer: media element abstraction and playback controller."""

from .controller import VideoPlaybackController
from .media import (
    MediaElement,
    MediaError,
    MediaEvent,
    MediaEventType,
    SimulatedMediaElement,
)
from .timer import ControlsTimer

__all__ = [
    "VideoPlaybackController",
    "MediaElement",
    "MediaError",
    "MediaEvent",
    "MediaEventType",
    "SimulatedMediaElement",
    "ControlsTimer",
]
