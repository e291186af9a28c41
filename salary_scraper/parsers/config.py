"""
Per-call parser configuration.
"""

from dataclasses import dataclass
from typing import Optional

from salary_scraper.config.settings import Settings, settings as default_settings


@dataclass(frozen=True)
class ParserConfig:
    """
    Options passed explicitly into every page parser.

    Attributes:
        base_url: Prefix concatenated to relative hrefs (no slash handling).
        letter_limit: Max index anchors to read, None for unbounded.
        job_limit: Max letter-page rows to read, None for unbounded.
        html_parser: BeautifulSoup tree builder name.
    """

    base_url: str = "http://www.payscale.com"
    letter_limit: Optional[int] = None
    job_limit: Optional[int] = None
    html_parser: str = "lxml"

    def __post_init__(self):
        for name in ("letter_limit", "job_limit"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be None or >= 0, got {value}")

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "ParserConfig":
        """Build a config from application settings (environment by default)."""
        source = source or default_settings
        return cls(
            base_url=source.base_url,
            letter_limit=source.letter_limit,
            job_limit=source.job_limit,
            html_parser=source.html_parser,
        )


def resolve_config(config: Optional[ParserConfig]) -> ParserConfig:
    return config if config is not None else ParserConfig.from_settings()


def apply_limit(items: list, limit: Optional[int]) -> list:
    """Keep the first ``limit`` items, or all of them when limit is None."""
    return items if limit is None else items[:limit]
