"""Abstract data source interfaces for the JSPEC portfolio site."""

from abc import ABC, abstractmethod
from typing import List

from ..models.project import Project
from ..models.company import CompanyData, Testimonial


class ProjectSource(ABC):
    """Abstract source of portfolio projects.

    The mock implementation stands in for a real network client; any
    implementation can be substituted without changing the portfolio
    section or the playback controller.
    """

    @abstractmethod
    async def load(self) -> List[Project]:
        """Load the full project collection.

        Returns:
            Projects in display order

        Raises:
            LoadError: If the request, parsing or validation fails
        """
        pass


class CompanySource(ABC):
    """Abstract source of company content."""

    @abstractmethod
    async def load_company_data(self) -> CompanyData:
        """Load stats, services, testimonials and certifications.

        Raises:
            LoadError: If loading fails
        """
        pass

    @abstractmethod
    async def load_testimonials(self) -> List[Testimonial]:
        """Load the full testimonial list (with avatars).

        Raises:
            LoadError: If loading fails
        """
        pass


class SourceError(Exception):
    """Base exception for data source operations."""
    pass


class LoadError(SourceError):
    """A load request failed (network, parse or timeout)."""
    pass
