"""Project card view models."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..models.project import Project
from ..utils.formatting import format_date_range

DEFAULT_PLACEHOLDER_IMAGE = "/placeholder.svg?height=200&width=400&text=Project+Image"

STATUS_LABELS = {
    "completed": "Completed",
    "in-progress": "In Progress",
}


class ProjectCard(BaseModel):
    """What a portfolio card renders for one project."""
    project_id: str
    title: str
    client: str
    contractor: str
    location: str
    description: str
    status_label: str
    completed: bool
    image: str = Field(..., description="Cover image, placeholder when the project has none")
    show_play: bool = Field(False, description="Play affordance, only when a video exists")
    date_range: str
    tags: List[str] = Field(default_factory=list)
    progress: Optional[int] = Field(None, description="Progress bar value, only while in progress")

    @classmethod
    def from_project(cls, project: Project, placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE) -> "ProjectCard":
        return cls(
            project_id=project.id,
            title=project.title,
            client=project.client,
            contractor=project.contractor,
            location=project.location,
            description=project.description,
            status_label=STATUS_LABELS[project.status],
            completed=project.is_completed,
            image=project.image_url or placeholder_image,
            show_play=project.has_video,
            date_range=format_date_range(project.start_date, project.end_date),
            tags=list(project.tags),
            progress=project.display_progress,
        )
