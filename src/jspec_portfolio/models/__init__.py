"""
Data models for the JSPEC portfolio site.

This module provides Pydantic models for type safety and validation
throughout the application.
"""

from .project import (
    Project,
    ProjectStatus,
    ProjectStats,
)
from .playback import (
    PlaybackSession,
    PlayerState,
)
from .company import (
    CompanyData,
    CompanyStats,
    Service,
    Testimonial,
    Certification,
)

__all__ = [
    # Projects
    "Project",
    "ProjectStatus",
    "ProjectStats",
    # Playback
    "PlaybackSession",
    "PlayerState",
    # Company
    "CompanyData",
    "CompanyStats",
    "Service",
    "Testimonial",
    "Certification",
]
