"""Utility functions for source operations."""

import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.project import Project
from .interface import LoadError

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_FETCH_ERROR = "Failed to fetch data"


def parse_project(record: Any) -> Project:
    """Validate a single raw record.

    Args:
        record: Decoded JSON object

    Returns:
        Validated Project

    Raises:
        LoadError: If the record is not an object or fails validation
    """
    if not isinstance(record, dict):
        raise LoadError(f"Project record must be an object, got {type(record).__name__}")
    try:
        return Project.model_validate(record)
    except ValidationError as e:
        record_id = record.get("id", "?")
        raise LoadError(f"Invalid project record {record_id}: {e.error_count()} error(s)") from e


def parse_projects(records: Any, strict: bool = False) -> List[Project]:
    """Validate raw records at the load boundary.

    Malformed records are never propagated. In lenient mode they are
    dropped with a warning; in strict mode the whole load fails.

    Args:
        records: Decoded JSON payload, expected to be a list
        strict: If True, any malformed record fails the load

    Returns:
        Valid projects in their original order

    Raises:
        LoadError: If the payload is not a list, or strict and a record is malformed
    """
    if not isinstance(records, list):
        raise LoadError(f"Expected a list of projects, got {type(records).__name__}")

    projects = []
    for index, record in enumerate(records):
        try:
            projects.append(parse_project(record))
        except LoadError as e:
            if strict:
                raise
            logger.warning(f"Skipping project record {index}: {e}")
    return projects


class ApiResult(BaseModel, Generic[T]):
    """Settled outcome of a source call."""
    data: Optional[T] = None
    error: Optional[str] = None
    loading: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


async def api_call(fn: Callable[[], Awaitable[T]]) -> ApiResult[T]:
    """Run a source call and convert any failure into an error result."""
    try:
        data = await fn()
        return ApiResult(data=data)
    except Exception as e:
        logger.error(f"API Error: {e}")
        return ApiResult(error=GENERIC_FETCH_ERROR)
