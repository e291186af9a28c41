"""
Application settings and configuration.
Uses pydantic-settings for environment variable loading.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SALARY_SCRAPER_",
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Site
    base_url: str = Field(
        default="http://www.payscale.com",
        description="Prefix joined to relative hrefs found in scraped pages"
    )

    # Parsing limits (None means unbounded)
    letter_limit: Optional[int] = Field(
        default=None,
        description="Maximum number of index letters to process"
    )
    job_limit: Optional[int] = Field(
        default=None,
        description="Maximum number of jobs to process per letter page"
    )
    html_parser: str = Field(
        default="lxml",
        description="BeautifulSoup tree builder"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")


# Global settings instance
settings = Settings()
