"""
structlog configuration.

Library code only calls ``structlog.get_logger()``; applications embedding the
parsers call ``configure_logging()`` once at startup.
"""

import logging
from typing import Optional

import structlog

from salary_scraper.config.settings import settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog rendering.

    Args:
        level: Minimum level name (DEBUG, INFO, ...). Defaults to settings.log_level.
        fmt: "json" or "console". Defaults to settings.log_format.
    """
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()
    numeric_level = getattr(logging, level, logging.INFO)

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
