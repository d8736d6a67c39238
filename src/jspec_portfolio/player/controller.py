"""
Video playback controller.

Stateful wrapper around a MediaElement exposing transport controls and an
auto-hiding controls overlay. Owns the single active PlaybackSession.
"""

import logging
import math
from functools import partial
from typing import Optional

from ..models.playback import PlaybackSession, PlayerState
from ..models.project import Project
from ..utils.formatting import format_time
from ..utils.observable import Observable
from .media import MediaElement, MediaError, MediaEvent, MediaEventType, MediaListener
from .timer import ControlsTimer

logger = logging.getLogger(__name__)


class VideoPlaybackController(Observable[Optional[PlaybackSession]]):
    """State machine over a media element: closed, open-paused, open-playing.

    Listeners receive a copy of the session after every change, or None
    once the viewer closes. Operations on a closed controller are no-ops.
    """

    def __init__(self, media: MediaElement, hide_delay: float = 3.0):
        """Initialize controller.

        Args:
            media: Playback primitive to drive
            hide_delay: Seconds of pointer inactivity before controls hide while playing
        """
        super().__init__()
        self.media = media
        self.hide_delay = hide_delay
        self._session: Optional[PlaybackSession] = None
        self._timer: Optional[ControlsTimer] = None
        self._media_listener: Optional[MediaListener] = None

    # State

    def snapshot(self) -> Optional[PlaybackSession]:
        if self._session is None:
            return None
        return self._session.model_copy()

    @property
    def session(self) -> Optional[PlaybackSession]:
        """Copy of the active session, None when closed."""
        return self.snapshot()

    @property
    def state(self) -> PlayerState:
        if self._session is None:
            return PlayerState.CLOSED
        return self._session.state

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def clock_text(self) -> str:
        """On-screen clock, e.g. 0:42 / 2:00."""
        if self._session is None:
            return format_time(0) + " / " + format_time(0)
        return f"{format_time(self._session.position_seconds)} / {format_time(self._session.duration_seconds)}"

    # Lifecycle

    def open(self, project: Project) -> PlaybackSession:
        """Open the viewer for a project, replacing any open session."""
        if self._session is not None:
            logger.debug(f"Replacing session {self._session.session_id}")
            self._teardown()

        session = PlaybackSession(
            project_id=project.id,
            media_ref=project.video_url or "",
            title=project.title,
            description=project.description or None,
        )
        self._session = session
        self._timer = ControlsTimer()
        self._media_listener = partial(self._on_media_event, session)

        # Listen before loading so early metadata reaches the new session
        self.media.add_listener(self._media_listener)
        self.media.set_muted(False)
        self.media.load(session.media_ref)

        if session.has_media:
            logger.info(f"Opened video viewer for '{project.title}' ({session.media_ref})")
        else:
            logger.info(f"Opened video viewer for '{project.title}' without media")
        self._notify()
        return session.model_copy()

    def close(self) -> None:
        """Stop playback and discard the session."""
        if self._session is None:
            return
        logger.info(f"Closed video viewer '{self._session.title}'")
        self._teardown()
        self._notify()

    def _teardown(self) -> None:
        session = self._session
        if self._timer is not None:
            self._timer.cancel()
        if self._media_listener is not None:
            self.media.remove_listener(self._media_listener)
        if session is not None and session.fullscreen:
            self.media.exit_fullscreen()
        self.media.pause()
        self.media.unload()

        self._session = None
        self._timer = None
        self._media_listener = None

    # Transport

    async def toggle_play(self) -> None:
        session = self._session
        if session is None:
            return

        if session.playing:
            self.media.pause()
            session.playing = False
            session.controls_visible = True
            self._timer.cancel()
            self._notify()
            return

        if not session.has_media:
            logger.info(f"No video available for '{session.title}'")
            return

        await self._start_playback(session)

    async def _start_playback(self, session: PlaybackSession) -> None:
        # Subscribers hear about playing only once play() has succeeded
        session.playing = True
        try:
            await self.media.play()
        except MediaError as e:
            if session is self._session:
                self._fail(session, str(e))
            return

        if session is not self._session:
            return
        if not session.playing:
            # Paused while play() was pending
            self.media.pause()
            return
        session.error = None
        self._notify()

    def seek(self, seconds: float) -> None:
        """Move the playback clock, clamped to [0, duration]."""
        session = self._session
        if session is None:
            return
        if seconds is None or math.isnan(seconds):
            logger.debug("Ignoring seek to an invalid position")
            return

        target = min(max(0.0, float(seconds)), session.duration_seconds)
        self.media.seek(target)
        session.position_seconds = target
        self._notify()

    async def restart(self) -> None:
        """Rewind to 0, resuming playback only if it was playing."""
        session = self._session
        if session is None:
            return

        was_playing = session.playing
        self.media.pause()
        session.playing = False
        self.media.seek(0)
        session.position_seconds = 0.0

        if was_playing:
            await self._start_playback(session)
        else:
            self._notify()

    def toggle_mute(self) -> None:
        session = self._session
        if session is None:
            return
        session.muted = not session.muted
        self.media.set_muted(session.muted)
        self._notify()

    def toggle_fullscreen(self) -> None:
        session = self._session
        if session is None:
            return
        try:
            if session.fullscreen:
                self.media.exit_fullscreen()
            else:
                self.media.request_fullscreen()
        except MediaError as e:
            logger.warning(f"Fullscreen change refused: {e}")
            return
        session.fullscreen = not session.fullscreen
        self._notify()

    # Controls overlay

    def pointer_activity(self) -> None:
        """Show controls and restart the inactivity countdown."""
        session = self._session
        if session is None:
            return
        session.controls_visible = True
        self._timer.start(self.hide_delay, partial(self._hide_controls, session))
        self._notify()

    def pointer_leave(self) -> None:
        """Hide controls immediately if playing."""
        session = self._session
        if session is None:
            return
        self._timer.cancel()
        if session.playing:
            session.controls_visible = False
            self._notify()

    def _hide_controls(self, session: PlaybackSession) -> None:
        if session is not self._session:
            return
        if session.playing and session.controls_visible:
            session.controls_visible = False
            self._notify()

    # Media events

    def _on_media_event(self, session: PlaybackSession, event: MediaEvent) -> None:
        if session is not self._session:
            return  # event for a closed or replaced session

        if event.type == MediaEventType.LOADED_METADATA:
            session.duration_seconds = max(0.0, event.duration)
            session.position_seconds = min(session.position_seconds, session.duration_seconds)
        elif event.type == MediaEventType.TIME_UPDATE:
            if event.generation < self.media.generation:
                return  # produced before the latest seek
            if event.duration > 0:
                session.duration_seconds = event.duration
            session.position_seconds = min(max(0.0, event.position), session.duration_seconds)
        elif event.type == MediaEventType.ENDED:
            session.playing = False
            session.controls_visible = True
            self._timer.cancel()
            logger.debug(f"Playback of '{session.title}' reached the end")
        elif event.type == MediaEventType.ERROR:
            self._fail(session, event.message or "Playback failed")
            return

        self._notify()

    def _fail(self, session: PlaybackSession, message: str) -> None:
        logger.warning(f"Playback error for '{session.title}': {message}")
        self.media.pause()
        session.playing = False
        session.controls_visible = True
        session.error = message
        self._timer.cancel()
        self._notify()
