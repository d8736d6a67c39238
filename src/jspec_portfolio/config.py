"""Configuration management for the JSPEC portfolio site."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project data source: "mock", "http" or "file"
    source_type: str = "mock"
    projects_api_url: Optional[str] = None
    projects_file: str = "./data/projects.json"
    request_timeout: float = 10.0  # seconds
    strict_records: bool = False

    # Simulated network latency for the mock sources (seconds)
    mock_latency: float = 1.0
    company_latency: float = 0.8
    testimonials_latency: float = 0.6

    # Video viewer
    controls_hide_delay: float = 3.0  # seconds of pointer inactivity
    placeholder_image: str = "/placeholder.svg?height=200&width=400&text=Project+Image"
    placeholder_poster: str = "/placeholder.svg?height=400&width=800&text=JSPEC+Project+Video"

    # Web interface
    server_port: int = 7860
    viewer_refresh_interval: float = 1.0  # seconds between viewer re-renders

    # Development
    debug: bool = False
    log_level: str = "INFO"

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    def validate_source(self) -> bool:
        """Check if the configured project source has what it needs."""
        if self.source_type == "http":
            return bool(self.projects_api_url)
        elif self.source_type == "file":
            return bool(self.projects_file)
        return self.source_type == "mock"


# Global settings instance
settings = Settings()
