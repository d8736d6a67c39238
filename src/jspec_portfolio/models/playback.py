"""
Playback session data model.

Transient state of an open video viewer, owned exclusively by the
VideoPlaybackController.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field
import uuid


class PlayerState(str, Enum):
    """Observable states of the video viewer."""
    CLOSED = "closed"
    OPEN_PAUSED = "open-paused"
    OPEN_PLAYING = "open-playing"


class PlaybackSession(BaseModel):
    """State of the currently open video viewer."""
    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique session ID")
    project_id: Optional[str] = Field(None, description="Project the session was opened for")
    media_ref: str = Field("", description="Media source, empty when no video is available")
    title: str = Field("", description="Title copied from the project at open time")
    description: Optional[str] = Field(None, description="Description copied from the project")

    # Transport state
    playing: bool = False
    muted: bool = False
    fullscreen: bool = False
    position_seconds: float = Field(0.0, ge=0, description="Playback clock in seconds")
    duration_seconds: float = Field(0.0, ge=0, description="0 until media metadata has loaded")

    # Overlay
    controls_visible: bool = True

    # Failure
    error: Optional[str] = Field(None, description="Playback error message")

    @property
    def has_media(self) -> bool:
        return bool(self.media_ref)

    @property
    def state(self) -> PlayerState:
        return PlayerState.OPEN_PLAYING if self.playing else PlayerState.OPEN_PAUSED

    @property
    def progress_percent(self) -> float:
        """Position as a percentage of duration, 0 while duration is unknown."""
        if self.duration_seconds <= 0:
            return 0.0
        return min(100.0, self.position_seconds / self.duration_seconds * 100)
