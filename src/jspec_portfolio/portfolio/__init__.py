"""Portfolio section: project loading, statistics and cards."""

from .cards import ProjectCard
from .section import PortfolioSection, PortfolioState, LOAD_ERROR_MESSAGE

__all__ = [
    "ProjectCard",
    "PortfolioSection",
    "PortfolioState",
    "LOAD_ERROR_MESSAGE",
]
