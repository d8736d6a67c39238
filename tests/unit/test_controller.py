"""Tests for VideoPlaybackController."""

import asyncio
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock

from jspec_portfolio.models.playback import PlayerState
from jspec_portfolio.player.controller import VideoPlaybackController
from jspec_portfolio.player.media import (
    SimulatedMediaElement,
    MediaError,
    MediaEvent,
    MediaEventType,
)

HIDE_DELAY = 0.05


@pytest.fixture
def media():
    # Large tick so the clock never advances on its own during a test
    return SimulatedMediaElement(
        durations={"a.mp4": 120.0, "b.mp4": 30.0},
        tick=10.0,
        broken={"broken.mp4"},
    )


@pytest_asyncio.fixture
async def controller(media):
    controller = VideoPlaybackController(media, hide_delay=HIDE_DELAY)
    yield controller
    controller.close()


async def open_loaded(controller, project):
    """Open a project and let its metadata arrive."""
    controller.open(project)
    await asyncio.sleep(0.01)


class TestLifecycle:
    """Test opening, closing and replacing sessions."""

    @pytest.mark.asyncio
    async def test_initially_closed(self, controller):
        assert controller.state == PlayerState.CLOSED
        assert controller.session is None
        assert not controller.is_open

    @pytest.mark.asyncio
    async def test_open_resets_session(self, controller, project_factory):
        project = project_factory(video_url="a.mp4", title="Kannur Bypass Project")
        await open_loaded(controller, project)

        session = controller.session
        assert controller.state == PlayerState.OPEN_PAUSED
        assert session.media_ref == "a.mp4"
        assert session.title == "Kannur Bypass Project"
        assert session.description == project.description
        assert session.position_seconds == 0
        assert session.duration_seconds == 120.0
        assert session.controls_visible
        assert not session.playing

    @pytest.mark.asyncio
    async def test_open_without_video(self, controller, project_factory):
        """Test a project without media opens a placeholder session."""
        await open_loaded(controller, project_factory(video_url=None))

        await controller.toggle_play()

        session = controller.session
        assert session.media_ref == ""
        assert not session.has_media
        assert not session.playing
        assert session.error is None

    @pytest.mark.asyncio
    async def test_close_stops_playback(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()

        controller.close()

        assert controller.state == PlayerState.CLOSED
        assert media.paused
        assert media.src == ""
        assert media.listener_count == 0

    @pytest.mark.asyncio
    async def test_close_when_closed_is_noop(self, controller):
        controller.close()
        assert controller.state == PlayerState.CLOSED

    @pytest.mark.asyncio
    async def test_reopen_starts_fresh(self, controller, project_factory):
        project = project_factory()
        await open_loaded(controller, project)
        await controller.toggle_play()
        controller.seek(60)
        controller.close()

        await open_loaded(controller, project)

        session = controller.session
        assert session.position_seconds == 0
        assert not session.playing

    @pytest.mark.asyncio
    async def test_open_replaces_session(self, controller, media, project_factory):
        await open_loaded(controller, project_factory("p1", video_url="a.mp4"))
        first_id = controller.session.session_id

        await open_loaded(controller, project_factory("p2", video_url="b.mp4"))

        assert controller.session.session_id != first_id
        assert controller.session.project_id == "p2"
        assert controller.session.duration_seconds == 30.0
        assert media.listener_count == 1

    @pytest.mark.asyncio
    async def test_ops_on_closed_controller(self, controller):
        await controller.toggle_play()
        await controller.restart()
        controller.seek(10)
        controller.toggle_mute()
        controller.toggle_fullscreen()
        controller.pointer_activity()
        controller.pointer_leave()

        assert controller.state == PlayerState.CLOSED


class TestTransport:
    """Test play, seek, restart, mute and fullscreen."""

    @pytest.mark.asyncio
    async def test_toggle_play(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())

        await controller.toggle_play()
        assert controller.state == PlayerState.OPEN_PLAYING
        assert not media.paused

        await controller.toggle_play()
        assert controller.state == PlayerState.OPEN_PAUSED
        assert media.paused

    @pytest.mark.asyncio
    async def test_scenario(self, controller, project_factory):
        """Mute, clamp a seek, restart while paused, close."""
        await open_loaded(controller, project_factory(video_url="a.mp4"))
        assert controller.session.duration_seconds == 120.0

        controller.toggle_mute()
        assert controller.session.muted
        assert not controller.session.playing

        controller.seek(300)
        assert controller.session.position_seconds == 120.0

        await controller.restart()
        assert controller.session.position_seconds == 0
        assert not controller.session.playing

        controller.close()
        assert controller.state == PlayerState.CLOSED

    @pytest.mark.asyncio
    async def test_seek_clamps_below_zero(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        controller.seek(-5)
        assert controller.session.position_seconds == 0

    @pytest.mark.asyncio
    async def test_seek_before_metadata(self, controller, project_factory):
        """Test seeks clamp to 0 while duration is unknown."""
        controller.open(project_factory())
        controller.seek(50)
        assert controller.session.position_seconds == 0

    @pytest.mark.asyncio
    async def test_seek_keeps_play_state(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()

        controller.seek(42.5)

        assert controller.session.position_seconds == 42.5
        assert controller.session.playing

    @pytest.mark.asyncio
    async def test_restart_while_playing_resumes(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        controller.seek(80)

        await controller.restart()

        assert controller.session.position_seconds == 0
        assert controller.session.playing
        assert not media.paused

    @pytest.mark.asyncio
    async def test_mute_keeps_play_state(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()

        controller.toggle_mute()
        assert controller.session.muted
        assert media.muted
        assert controller.session.playing

        controller.toggle_mute()
        assert not controller.session.muted
        assert not media.muted

    @pytest.mark.asyncio
    async def test_fullscreen_toggle(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        controller.seek(10)

        controller.toggle_fullscreen()
        assert controller.session.fullscreen
        assert media.fullscreen
        assert controller.session.playing
        assert controller.session.position_seconds == 10

        controller.toggle_fullscreen()
        assert not controller.session.fullscreen
        assert not media.fullscreen

    @pytest.mark.asyncio
    async def test_close_exits_fullscreen(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        controller.toggle_fullscreen()

        controller.close()
        assert not media.fullscreen

    @pytest.mark.asyncio
    async def test_natural_end(self, project_factory):
        """Test end-of-media pauses without rewinding."""
        media = SimulatedMediaElement(durations={"short.mp4": 0.05}, tick=0.01)
        controller = VideoPlaybackController(media, hide_delay=HIDE_DELAY)
        await open_loaded(controller, project_factory(video_url="short.mp4"))

        await controller.toggle_play()
        await asyncio.sleep(0.2)

        assert not controller.session.playing
        assert controller.session.position_seconds == 0.05
        assert controller.session.controls_visible
        controller.close()

    @pytest.mark.asyncio
    async def test_clock_updates_reach_session(self, project_factory):
        """Test position updates arrive without polling."""
        media = SimulatedMediaElement(durations={"a.mp4": 120.0}, tick=0.01)
        controller = VideoPlaybackController(media, hide_delay=HIDE_DELAY)
        await open_loaded(controller, project_factory(video_url="a.mp4"))

        await controller.toggle_play()
        await asyncio.sleep(0.05)

        assert controller.session.position_seconds > 0
        controller.close()


class TestMediaEvents:
    """Test ordering and teardown of media callbacks."""

    @pytest.mark.asyncio
    async def test_stale_time_update_after_seek(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        stale = MediaEvent(
            type=MediaEventType.TIME_UPDATE,
            position=5.0,
            duration=120.0,
            generation=media.generation,
        )

        controller.seek(60)
        media.dispatch(stale)
        assert controller.session.position_seconds == 60

        fresh = MediaEvent(
            type=MediaEventType.TIME_UPDATE,
            position=61.0,
            duration=120.0,
            generation=media.generation,
        )
        media.dispatch(fresh)
        assert controller.session.position_seconds == 61

    @pytest.mark.asyncio
    async def test_time_update_is_clamped(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        media.dispatch(MediaEvent(
            type=MediaEventType.TIME_UPDATE,
            position=-1.0,
            generation=media.generation,
        ))
        assert controller.session.position_seconds == 0

    @pytest.mark.asyncio
    async def test_no_updates_after_close(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        snapshots = []
        controller.subscribe(snapshots.append)

        controller.close()
        assert snapshots[-1] is None
        count = len(snapshots)

        media.dispatch(MediaEvent(type=MediaEventType.TIME_UPDATE, position=30, generation=media.generation))
        media.dispatch(MediaEvent(type=MediaEventType.LOADED_METADATA, duration=90))
        await asyncio.sleep(0.01)

        assert len(snapshots) == count
        assert controller.session is None

    @pytest.mark.asyncio
    async def test_replaced_session_ignores_old_events(self, controller, media, project_factory):
        controller.open(project_factory("p1", video_url="a.mp4"))
        # Second open before the first metadata arrives
        controller.open(project_factory("p2", video_url="b.mp4"))
        await asyncio.sleep(0.01)

        assert controller.session.project_id == "p2"
        assert controller.session.duration_seconds == 30.0

    @pytest.mark.asyncio
    async def test_subscribers_get_copies(self, controller, project_factory):
        snapshots = []
        controller.subscribe(snapshots.append)

        await open_loaded(controller, project_factory())
        snapshots[-1].playing = True

        assert not controller.session.playing


class TestPlaybackErrors:
    """Test playback failure handling."""

    @pytest.mark.asyncio
    async def test_load_error_sets_error_state(self, controller, project_factory):
        await open_loaded(controller, project_factory(video_url="broken.mp4"))

        session = controller.session
        assert session.error
        assert not session.playing

        # Manual retry does not crash and stays paused
        await controller.toggle_play()
        assert not controller.session.playing
        assert controller.session.error

    @pytest.mark.asyncio
    async def test_play_rejected(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        media.play = AsyncMock(side_effect=MediaError("decode error"))

        await controller.toggle_play()

        assert controller.session.error == "decode error"
        assert not controller.session.playing

    @pytest.mark.asyncio
    async def test_rejected_play_never_published_as_playing(self, controller, media, project_factory):
        await open_loaded(controller, project_factory())
        media.play = AsyncMock(side_effect=MediaError("decode error"))
        snapshots = []
        controller.subscribe(snapshots.append)

        await controller.toggle_play()

        assert snapshots
        assert all(not s.playing for s in snapshots)
        assert snapshots[-1].state == PlayerState.OPEN_PAUSED
        assert snapshots[-1].error == "decode error"

    @pytest.mark.asyncio
    async def test_successful_play_is_published(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        snapshots = []
        controller.subscribe(snapshots.append)

        await controller.toggle_play()

        assert [s.state for s in snapshots] == [PlayerState.OPEN_PLAYING]

    @pytest.mark.asyncio
    async def test_next_session_is_clean(self, controller, project_factory):
        await open_loaded(controller, project_factory("p1", video_url="broken.mp4"))
        await open_loaded(controller, project_factory("p2", video_url="a.mp4"))

        assert controller.session.error is None
        await controller.toggle_play()
        assert controller.session.playing


class TestControlsVisibility:
    """Test the auto-hiding controls overlay."""

    @pytest.mark.asyncio
    async def test_hides_while_playing(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()

        controller.pointer_activity()
        assert controller.session.controls_visible

        await asyncio.sleep(HIDE_DELAY * 2)
        assert not controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_stays_visible_while_paused(self, controller, project_factory):
        await open_loaded(controller, project_factory())

        controller.pointer_activity()
        await asyncio.sleep(HIDE_DELAY * 2)

        assert controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_activity_restarts_timer(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()

        controller.pointer_activity()
        await asyncio.sleep(HIDE_DELAY * 0.6)
        controller.pointer_activity()
        await asyncio.sleep(HIDE_DELAY * 0.6)
        assert controller.session.controls_visible

        await asyncio.sleep(HIDE_DELAY)
        assert not controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_activity_shows_hidden_controls(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        controller.pointer_leave()
        assert not controller.session.controls_visible

        controller.pointer_activity()
        assert controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_pointer_leave(self, controller, project_factory):
        await open_loaded(controller, project_factory())

        controller.pointer_leave()
        assert controller.session.controls_visible

        await controller.toggle_play()
        controller.pointer_leave()
        assert not controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_pause_shows_controls(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        controller.pointer_leave()

        await controller.toggle_play()
        assert controller.session.controls_visible

    @pytest.mark.asyncio
    async def test_close_cancels_timer(self, controller, project_factory):
        await open_loaded(controller, project_factory())
        await controller.toggle_play()
        controller.pointer_activity()
        snapshots = []
        controller.subscribe(snapshots.append)

        controller.close()
        await asyncio.sleep(HIDE_DELAY * 2)

        assert snapshots == [None]

    @pytest.mark.asyncio
    async def test_timer_does_not_leak_into_new_session(self, controller, project_factory):
        await open_loaded(controller, project_factory("p1"))
        await controller.toggle_play()
        controller.pointer_activity()

        await open_loaded(controller, project_factory("p2"))
        await controller.toggle_play()
        await asyncio.sleep(HIDE_DELAY * 2)

        # Old countdown was cancelled, new session had no pointer activity
        assert controller.session.controls_visible
