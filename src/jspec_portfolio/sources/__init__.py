"""Data sources for the JSPEC portfolio site.

This module provides the project and company content sources: an
in-memory mock, an HTTP client and a JSON file reader.
"""

from typing import Optional

from ..config import Settings, settings as default_settings
from .interface import ProjectSource, CompanySource, SourceError, LoadError
from .mock import MockProjectSource, MockCompanySource
from .http import HttpProjectSource
from .filesystem import JsonFileProjectSource


def get_project_source(settings: Optional[Settings] = None) -> ProjectSource:
    """Create the project source selected by `settings.source_type`."""
    settings = settings or default_settings

    if settings.source_type == "mock":
        return MockProjectSource(latency=settings.mock_latency, strict=settings.strict_records)
    elif settings.source_type == "http":
        if not settings.projects_api_url:
            raise ValueError("projects_api_url is required for the http source")
        return HttpProjectSource(
            settings.projects_api_url,
            timeout=settings.request_timeout,
            strict=settings.strict_records,
        )
    elif settings.source_type == "file":
        return JsonFileProjectSource(settings.projects_file, strict=settings.strict_records)
    raise ValueError(f"Unknown source type: {settings.source_type}")


def get_company_source(settings: Optional[Settings] = None) -> CompanySource:
    """Create the company content source."""
    settings = settings or default_settings
    return MockCompanySource(
        company_latency=settings.company_latency,
        testimonials_latency=settings.testimonials_latency,
    )


__all__ = [
    "ProjectSource",
    "CompanySource",
    "SourceError",
    "LoadError",
    "MockProjectSource",
    "MockCompanySource",
    "HttpProjectSource",
    "JsonFileProjectSource",
    "get_project_source",
    "get_company_source",
]
