"""Shared fixtures."""

import pytest

from jspec_portfolio.models.project import Project


def make_project(project_id: str = "p1", **overrides) -> Project:
    """Build a valid in-progress project, overriding any field by name."""
    data = dict(
        id=project_id,
        title="Pune Metro Project",
        client="RVNL",
        contractor="STRUCTICON",
        description="LG Commissioning, Segment Lifting & Erection",
        status="in-progress",
        progress=60,
        tags=["LG Systems", "Segments"],
        video_url="a.mp4",
        image_url=None,
        location="Maharashtra, India",
        start_date="2023-04-15",
    )
    data.update(overrides)
    return Project(**data)


@pytest.fixture
def project_factory():
    return make_project


@pytest.fixture
def raw_record():
    """Wire-format record as served by `GET /projects`."""
    return {
        "id": "1",
        "title": "Chennai to Bangalore Expressway",
        "client": "RCCL",
        "contractor": "ESTRUCTURA",
        "description": "LG Commissioning, I Girder Lifting & Erection",
        "status": "completed",
        "tags": ["LG Systems", "I Girder"],
        "videoUrl": "/placeholder-video.mp4",
        "imageUrl": "/placeholder.svg?height=300&width=400&text=Chennai+Expressway",
        "location": "Tamil Nadu, India",
        "startDate": "2022-01-15",
        "endDate": "2023-06-30",
    }


@pytest.fixture
def malformed_record():
    """Record with a misspelled field and a status outside the enum."""
    return {
        "id": "5",
        "title": "Chennai Metro Project",
        "client": "RVNL",
        "Subcontractor": "L&T",
        "description": "Erection & PT works",
        "status": "On progress",
        "progress": 60,
        "tags": ["LG Systems", "Segments"],
        "videoUrl": "/placeholder-video.mp4",
        "location": "Maharashtra, India",
        "startDate": "2023-04-15",
    }
