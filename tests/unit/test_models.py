"""
Unit tests for data models.

Tests Pydantic model validation, computed properties,
and derived statistics.
"""

import pytest
from datetime import date
from pydantic import ValidationError

from jspec_portfolio.models import (
    Project,
    ProjectStatus,
    ProjectStats,
    PlaybackSession,
    PlayerState,
    CompanyData,
)
from jspec_portfolio.sources.mock import COMPANY_RECORD


class TestProject:
    """Test Project model."""

    def test_create_from_wire_format(self, raw_record):
        """Test camelCase wire names and ISO dates."""
        project = Project.model_validate(raw_record)

        assert project.id == "1"
        assert project.status == ProjectStatus.COMPLETED
        assert project.video_url == "/placeholder-video.mp4"
        assert project.start_date == date(2022, 1, 15)
        assert project.end_date == date(2023, 6, 30)
        assert project.tags == ("LG Systems", "I Girder")

    def test_create_from_field_names(self, project_factory):
        """Test python field names are accepted too."""
        project = project_factory(video_url="b.mp4", end_date="2024-01-01")
        assert project.video_url == "b.mp4"
        assert project.end_date == date(2024, 1, 1)

    def test_rejects_unknown_status(self, raw_record):
        raw_record["status"] = "On progress"
        with pytest.raises(ValidationError):
            Project.model_validate(raw_record)

    def test_rejects_unknown_fields(self, malformed_record):
        malformed_record["status"] = "in-progress"
        with pytest.raises(ValidationError):
            Project.model_validate(malformed_record)

    def test_rejects_progress_out_of_range(self, project_factory):
        with pytest.raises(ValidationError):
            project_factory(progress=120)

    def test_rejects_end_before_start(self, project_factory):
        with pytest.raises(ValidationError):
            project_factory(start_date="2023-04-15", end_date="2023-01-01")

    def test_rejects_empty_id(self, project_factory):
        with pytest.raises(ValidationError):
            project_factory(project_id="")

    def test_is_immutable(self, project_factory):
        project = project_factory()
        with pytest.raises(ValidationError):
            project.title = "Renamed"

    def test_tags_are_immutable(self, raw_record):
        """Test tags of a loaded record cannot be changed in place."""
        project = Project.model_validate(raw_record)

        assert isinstance(project.tags, tuple)
        with pytest.raises(AttributeError):
            project.tags.append("Segments")
        assert project.tags == ("LG Systems", "I Girder")
        assert project.to_api_dict()["tags"] == ["LG Systems", "I Girder"]

    def test_progress_only_trusted_in_progress(self, project_factory):
        """Test display_progress hides progress on completed projects."""
        ongoing = project_factory(status="in-progress", progress=60)
        finished = project_factory(status="completed", progress=75)

        assert ongoing.display_progress == 60
        assert finished.display_progress is None

    def test_optional_fields(self, project_factory):
        """Test absent media and end date."""
        project = project_factory(video_url=None, image_url=None)

        assert not project.has_video
        assert project.image_url is None
        assert project.is_ongoing

    def test_to_api_dict(self, raw_record):
        """Test serialisation uses wire names and ISO dates."""
        project = Project.model_validate(raw_record)
        data = project.to_api_dict()

        assert data == raw_record


class TestProjectStats:
    """Test statistics derived from a collection."""

    def test_empty_collection(self):
        stats = ProjectStats.from_projects([])
        assert (stats.total, stats.completed, stats.in_progress) == (0, 0, 0)

    def test_counts(self, project_factory):
        projects = [
            project_factory("1", status="completed"),
            project_factory("2", status="completed"),
            project_factory("3", status="in-progress"),
        ]
        stats = ProjectStats.from_projects(projects)

        assert stats.total == 3
        assert stats.completed == 2
        assert stats.in_progress == 1
        assert stats.completed + stats.in_progress <= stats.total


class TestPlaybackSession:
    """Test PlaybackSession model."""

    def test_defaults(self):
        session = PlaybackSession(media_ref="a.mp4", title="Video")

        assert session.has_media
        assert not session.playing
        assert not session.muted
        assert session.controls_visible
        assert session.position_seconds == 0
        assert session.state == PlayerState.OPEN_PAUSED

    def test_state_follows_playing(self):
        session = PlaybackSession(media_ref="a.mp4", playing=True)
        assert session.state == PlayerState.OPEN_PLAYING

    def test_progress_percent(self):
        session = PlaybackSession(position_seconds=30, duration_seconds=120)
        assert session.progress_percent == 25.0

        # Duration unknown
        session = PlaybackSession(position_seconds=0, duration_seconds=0)
        assert session.progress_percent == 0.0

    def test_no_media(self):
        session = PlaybackSession()
        assert not session.has_media

    def test_unique_session_ids(self):
        assert PlaybackSession().session_id != PlaybackSession().session_id


class TestCompanyData:
    """Test company content models."""

    def test_parse_fixture(self):
        data = CompanyData.model_validate(COMPANY_RECORD)

        assert data.stats.years_experience == 23
        assert data.stats.success_rate == 100
        assert [s.title for s in data.services][0] == "Bridge Segments Erection"
        assert data.certifications[0].issued_on == date(2023, 1, 15)
        assert data.testimonials[0].avatar is None
