"""
Media element abstraction.

The playback primitive the controller drives: transport methods plus an
event stream for clock, metadata, end-of-media and error notifications.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Optional, Set
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class MediaEventType(str, Enum):
    """Events emitted by a media element."""
    TIME_UPDATE = "timeupdate"
    LOADED_METADATA = "loadedmetadata"
    ENDED = "ended"
    ERROR = "error"


class MediaEvent(BaseModel):
    """A single media notification."""
    type: MediaEventType
    position: float = Field(0.0, description="Playback clock when the event was produced")
    duration: float = Field(0.0, description="Known duration, 0 if unknown")
    generation: int = Field(0, description="Seek generation the event was produced in")
    message: Optional[str] = Field(None, description="Error description for error events")


class MediaError(Exception):
    """Media failed to load, decode or play."""
    pass


MediaListener = Callable[[MediaEvent], None]


class MediaElement(ABC):
    """Abstract media playback primitive.

    Every seek bumps `generation`; events carry the generation in which
    they were produced so consumers can drop clock updates that predate
    the latest seek.
    """

    def __init__(self):
        self._listeners: List[MediaListener] = []
        self.generation = 0
        self.src = ""
        self.muted = False
        self.fullscreen = False

    # Listeners

    def add_listener(self, listener: MediaListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: MediaListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def dispatch(self, event: MediaEvent) -> None:
        """Deliver an event to all current listeners."""
        for listener in list(self._listeners):
            listener(event)

    def _emit(self, event_type: MediaEventType, **kwargs) -> None:
        self.dispatch(MediaEvent(type=event_type, generation=self.generation, **kwargs))

    # Transport

    @abstractmethod
    def load(self, src: str) -> None:
        """Set the media source. Metadata arrives later as an event."""
        pass

    @abstractmethod
    async def play(self) -> None:
        """Start playback.

        Raises:
            MediaError: If there is no playable source
        """
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def unload(self) -> None:
        """Stop everything and release the source."""
        pass

    @abstractmethod
    def _set_position(self, seconds: float) -> None:
        pass

    def seek(self, seconds: float) -> None:
        self.generation += 1
        self._set_position(seconds)

    def set_muted(self, muted: bool) -> None:
        self.muted = muted

    def request_fullscreen(self) -> None:
        self.fullscreen = True

    def exit_fullscreen(self) -> None:
        self.fullscreen = False


class SimulatedMediaElement(MediaElement):
    """Media element driven by the asyncio loop instead of a decoder.

    Durations are looked up per source; sources listed in `broken` fail
    when their metadata would load.
    """

    def __init__(
        self,
        durations: Dict[str, float] = None,
        default_duration: float = 120.0,
        metadata_delay: float = 0.0,
        tick: float = 0.25,
        broken: Set[str] = None,
    ):
        """Initialize the simulated element.

        Args:
            durations: Duration in seconds per source
            default_duration: Duration for sources not in `durations`
            metadata_delay: Seconds before metadata (or the load error) arrives
            tick: Clock resolution in seconds
            broken: Sources that fail to load
        """
        super().__init__()
        self.durations = durations or {}
        self.default_duration = default_duration
        self.metadata_delay = metadata_delay
        self.tick = tick
        self.broken = broken or set()

        self.position = 0.0
        self.duration = 0.0
        self.paused = True
        self.failed = False
        self._metadata_handle: Optional[asyncio.Handle] = None
        self._clock_task: Optional[asyncio.Task] = None

    def load(self, src: str) -> None:
        self._reset()
        self.src = src
        if not src:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop: metadata resolves immediately
            self._resolve_metadata()
            return

        if self.metadata_delay > 0:
            self._metadata_handle = loop.call_later(self.metadata_delay, self._resolve_metadata)
        else:
            self._metadata_handle = loop.call_soon(self._resolve_metadata)

    def _resolve_metadata(self) -> None:
        self._metadata_handle = None
        if self.src in self.broken:
            self.failed = True
            logger.debug(f"Simulated load failure for {self.src}")
            self._emit(MediaEventType.ERROR, message=f"Failed to load media: {self.src}")
            return

        self.duration = float(self.durations.get(self.src, self.default_duration))
        self._emit(MediaEventType.LOADED_METADATA, position=self.position, duration=self.duration)

    async def play(self) -> None:
        if not self.src:
            raise MediaError("No media source loaded")
        if self.failed:
            raise MediaError(f"Media cannot be played: {self.src}")

        # Playing from the end starts over
        if self.duration > 0 and self.position >= self.duration:
            self.seek(0)

        self.paused = False
        if self._clock_task is None or self._clock_task.done():
            self._clock_task = asyncio.create_task(self._run_clock())

    def pause(self) -> None:
        self.paused = True
        self._stop_clock()

    def _set_position(self, seconds: float) -> None:
        upper = self.duration if self.duration > 0 else 0.0
        self.position = min(max(0.0, seconds), upper)
        if self.src:
            self._emit(MediaEventType.TIME_UPDATE, position=self.position, duration=self.duration)

    def unload(self) -> None:
        self._reset()
        self.src = ""
        self.fullscreen = False

    async def _run_clock(self) -> None:
        while not self.paused:
            await asyncio.sleep(self.tick)
            if self.paused:
                break
            if self.duration <= 0:
                continue  # metadata not loaded yet

            self.position = min(self.duration, self.position + self.tick)
            self._emit(MediaEventType.TIME_UPDATE, position=self.position, duration=self.duration)

            if self.position >= self.duration:
                self.paused = True
                self._emit(MediaEventType.ENDED, position=self.position, duration=self.duration)

    def _stop_clock(self) -> None:
        if self._clock_task is not None:
            try:
                current = asyncio.current_task()
            except RuntimeError:
                current = None
            if self._clock_task is not current:
                self._clock_task.cancel()
            self._clock_task = None

    def _reset(self) -> None:
        self._stop_clock()
        if self._metadata_handle is not None:
            self._metadata_handle.cancel()
            self._metadata_handle = None
        self.position = 0.0
        self.duration = 0.0
        self.paused = True
        self.failed = False
