"""HTTP project source.

Implements the `GET /projects` JSON contract: an array of project objects
with camelCase field names and ISO-8601 dates.
"""

import logging
from typing import List, Optional

import httpx

from ..models.project import Project
from .interface import ProjectSource, LoadError
from .utils import parse_projects

logger = logging.getLogger(__name__)


class HttpProjectSource(ProjectSource):
    """Project source backed by a JSON HTTP endpoint."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        strict: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize HTTP source.

        Args:
            base_url: API root, `/projects` is appended
            timeout: Request timeout in seconds
            strict: Fail the load on any malformed record
            client: Optional shared client (used as-is, not closed here)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.strict = strict
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}/projects"

    async def load(self) -> List[Project]:
        try:
            if self._client is not None:
                response = await self._client.get(self.url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise LoadError(f"Timed out loading projects from {self.url}") from e
        except httpx.HTTPStatusError as e:
            raise LoadError(f"Projects request failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise LoadError(f"Projects request failed: {e}") from e
        except ValueError as e:
            raise LoadError(f"Projects response is not valid JSON: {e}") from e

        projects = parse_projects(payload, strict=self.strict)
        logger.info(f"Loaded {len(projects)} projects from {self.url}")
        return projects
