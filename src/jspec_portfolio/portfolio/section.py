"""
Portfolio section.

Consumes a ProjectSource, tracks loading / error / success state, derives
statistics and opens the video viewer for a selected project.
"""

import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from ..models.project import Project, ProjectStats
from ..player.controller import VideoPlaybackController
from ..sources.interface import ProjectSource, LoadError
from ..utils.observable import Observable
from ..utils.simple_logger import log_start, log_complete, log_failed
from .cards import ProjectCard, DEFAULT_PLACEHOLDER_IMAGE

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load projects"


class PortfolioState(BaseModel):
    """Snapshot of the section as rendered."""
    projects: List[Project] = Field(default_factory=list, description="Current collection, replaced wholesale")
    loading: bool = Field(False, description="A load request is in flight")
    error: Optional[str] = Field(None, description="User-visible load error")
    stats: ProjectStats = Field(default_factory=ProjectStats)

    @property
    def has_error(self) -> bool:
        return self.error is not None


class PortfolioSection(Observable[PortfolioState]):
    """Loader consumer for the portfolio grid.

    Retry is user-initiated only. When requests overlap, `loading` stays
    true until the last one settles and only the newest result is applied.
    """

    def __init__(
        self,
        source: ProjectSource,
        player: Optional[VideoPlaybackController] = None,
        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
    ):
        """Initialize section.

        Args:
            source: Where projects come from
            player: Video viewer opened by `view_project`
            placeholder_image: Card image for projects without one
        """
        super().__init__()
        self.source = source
        self.player = player
        self.placeholder_image = placeholder_image

        self._projects: List[Project] = []
        self._stats = ProjectStats()
        self._error: Optional[str] = None
        self._in_flight = 0
        self._latest_request = 0

    # State

    def snapshot(self) -> PortfolioState:
        return PortfolioState(
            projects=list(self._projects),
            loading=self.loading,
            error=self._error,
            stats=self._stats,
        )

    @property
    def state(self) -> PortfolioState:
        return self.snapshot()

    @property
    def projects(self) -> List[Project]:
        return list(self._projects)

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def stats(self) -> ProjectStats:
        return self._stats

    @property
    def cards(self) -> List[ProjectCard]:
        return [ProjectCard.from_project(p, self.placeholder_image) for p in self._projects]

    def get_project(self, project_id: str) -> Optional[Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    # Loading

    async def load_projects(self) -> bool:
        """Load the collection from the source.

        Returns:
            True if this request's result was applied successfully
        """
        self._latest_request += 1
        request_id = self._latest_request
        self._in_flight += 1
        self._notify()

        log_start(logger, "Loading projects")
        try:
            projects = await self.source.load()
        except LoadError as e:
            log_failed(logger, f"Error loading projects: {e}")
            return self._record_failure(request_id)
        except Exception as e:
            logger.exception(f"Unexpected error loading projects: {e}")
            return self._record_failure(request_id)
        else:
            if request_id != self._latest_request:
                logger.debug(f"Discarding superseded project load #{request_id}")
                return False
            self._set_projects(projects)
            self._error = None
            log_complete(logger, f"Loaded {len(projects)} projects")
            return True
        finally:
            self._in_flight -= 1
            self._notify()

    async def retry(self) -> bool:
        """User-initiated 'Try Again'."""
        logger.info("Retrying project load")
        return await self.load_projects()

    def _record_failure(self, request_id: int) -> bool:
        # The stale collection is kept; only the newest request reports
        if request_id == self._latest_request:
            self._error = LOAD_ERROR_MESSAGE
        return False

    def _set_projects(self, projects: List[Project]) -> None:
        self._projects = list(projects)
        self._stats = ProjectStats.from_projects(self._projects)

    # Video viewer

    def view_project(self, project: Project) -> None:
        if self.player is None:
            logger.warning("No video player attached to the portfolio section")
            return
        self.player.open(project)

    def close_viewer(self) -> None:
        if self.player is not None:
            self.player.close()
