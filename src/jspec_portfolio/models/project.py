"""
Project data models.

Defines the portfolio entry returned by the project sources and the
statistics derived from a loaded collection.
"""

from datetime import date
from enum import Enum
from typing import List, Optional, Dict, Any, Sequence, Tuple
from pydantic import BaseModel, Field, validator


class ProjectStatus(str, Enum):
    """Lifecycle status of a construction engagement."""
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"


class Project(BaseModel):
    """One portfolio entry. Never mutated after load."""
    id: str = Field(..., min_length=1, description="Unique identifier")
    title: str = Field(..., description="Project name")
    client: str = Field(..., description="Client organisation")
    contractor: str = Field(..., description="Main contractor")
    description: str = Field(..., description="Scope of work")
    status: ProjectStatus = Field(..., description="completed or in-progress")
    progress: Optional[int] = Field(None, ge=0, le=100, description="Completion percentage")
    tags: Tuple[str, ...] = Field(default_factory=tuple, description="Display tags, in order")
    video_url: Optional[str] = Field(None, alias="videoUrl", description="Project video")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="Cover image")
    location: str = Field(..., description="Site location")
    start_date: date = Field(..., alias="startDate", description="Start of works")
    end_date: Optional[date] = Field(None, alias="endDate", description="End of works, None while ongoing")

    @validator('end_date')
    def validate_dates(cls, v, values):
        if v is not None and 'start_date' in values and v < values['start_date']:
            raise ValueError('endDate must not precede startDate')
        return v

    @property
    def is_completed(self) -> bool:
        return self.status == ProjectStatus.COMPLETED

    @property
    def is_in_progress(self) -> bool:
        return self.status == ProjectStatus.IN_PROGRESS

    @property
    def is_ongoing(self) -> bool:
        """No end date recorded yet."""
        return self.end_date is None

    @property
    def has_video(self) -> bool:
        return bool(self.video_url)

    @property
    def display_progress(self) -> Optional[int]:
        """Progress percentage, trusted only while the project is in progress."""
        if self.is_in_progress:
            return self.progress
        return None

    def to_api_dict(self) -> Dict[str, Any]:
        """Serialise to the `GET /projects` wire format."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        populate_by_name = True
        frozen = True
        extra = "forbid"


class ProjectStats(BaseModel):
    """Counts derived from a loaded project collection."""
    total: int = Field(0, ge=0)
    completed: int = Field(0, ge=0)
    in_progress: int = Field(0, ge=0)

    @classmethod
    def from_projects(cls, projects: Sequence[Project]) -> "ProjectStats":
        return cls(
            total=len(projects),
            completed=sum(1 for p in projects if p.is_completed),
            in_progress=sum(1 for p in projects if p.is_in_progress),
        )
