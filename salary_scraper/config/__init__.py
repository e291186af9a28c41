"""
Configuration module for the salary scraper.
"""

from salary_scraper.config.settings import settings, Settings, PROJECT_ROOT
from salary_scraper.config.logging import configure_logging

__all__ = ["settings", "Settings", "PROJECT_ROOT", "configure_logging"]
