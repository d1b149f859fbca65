"""Configuration system for StudioSpace.

Uses pydantic-settings to load configuration from environment variables
and .env files with sensible defaults for a Greater Toronto Area search.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Environment variables are prefixed with STUDIOSPACE_ (e.g., STUDIOSPACE_POSTAL_CODE).
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDIOSPACE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Search target
    postal_code: str = Field(
        default="L5A 4E6",
        description="Postal code to search near",
    )
    max_listings: int = Field(
        default=20,
        ge=1,
        description="Maximum cards taken per results page and listings reported",
    )

    # Browser timeouts
    page_timeout_seconds: int = Field(
        default=60,
        ge=1,
        description="Default timeout for any browser operation",
    )
    query_timeout_seconds: int = Field(
        default=20,
        ge=1,
        description="Navigation timeout for a single search results page",
    )
    detail_timeout_seconds: int = Field(
        default=15,
        ge=1,
        description="Navigation timeout for a listing detail page",
    )
    headless: bool = Field(default=True, description="Run Chromium headless")
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent presented by the browser and image client",
    )
    parallel_sources: bool = Field(
        default=False,
        description="Search sources concurrently, each in its own browser context",
    )
    debug_screenshots: bool = Field(
        default=False,
        description="Save a full-page screenshot of every results page",
    )

    # Image download
    image_download_timeout_seconds: int = Field(
        default=30,
        ge=1,
        description="Timeout for a single image download",
    )
    min_image_bytes: int = Field(
        default=1000,
        ge=0,
        description="Images at or below this size are treated as placeholders",
    )

    # Paths
    artifacts_path: Path = Field(
        default=Path("artifacts"),
        description="Directory for the listings export, images and debug output",
    )
    policy_file: Path | None = Field(
        default=None,
        description="JSON file overriding the classification keyword lists",
    )

    @property
    def debug_dir(self) -> Path:
        return self.artifacts_path / "debug"


# Singleton instance for easy import
config = Settings()
