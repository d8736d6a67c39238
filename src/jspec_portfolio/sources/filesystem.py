"""JSON file project source."""

import json
import logging
from pathlib import Path
from typing import List

import aiofiles

from ..models.project import Project
from .interface import ProjectSource, LoadError
from .utils import parse_projects

logger = logging.getLogger(__name__)


class JsonFileProjectSource(ProjectSource):
    """Project source reading the `GET /projects` payload from a local file.

    Useful for publishing an exported project list without running an API.
    """

    def __init__(self, file_path: str, strict: bool = False):
        """Initialize file source.

        Args:
            file_path: Path to a JSON array of project objects
            strict: Fail the load on any malformed record
        """
        self.file_path = Path(file_path)
        self.strict = strict

    async def load(self) -> List[Project]:
        try:
            async with aiofiles.open(self.file_path, 'r', encoding='utf-8') as f:
                content = await f.read()
        except OSError as e:
            raise LoadError(f"Cannot read projects file {self.file_path}: {e}") from e

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise LoadError(f"Projects file {self.file_path} is not valid JSON: {e}") from e

        projects = parse_projects(payload, strict=self.strict)
        logger.info(f"Loaded {len(projects)} projects from {self.file_path}")
        return projects

    async def save(self, projects: List[Project]) -> None:
        """Write projects in the wire format (atomic replace)."""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.file_path.with_suffix(self.file_path.suffix + '.tmp')

        async with aiofiles.open(temp_path, 'w', encoding='utf-8') as f:
            await f.write(json.dumps([p.to_api_dict() for p in projects], indent=2))

        temp_path.replace(self.file_path)
