"""
Page parsers for the salary comparison site.
"""

from salary_scraper.parsers.config import ParserConfig
from salary_scraper.parsers.footnote import parse_footnote
from salary_scraper.parsers.index_page import parse_index_page
from salary_scraper.parsers.job_page import parse_job_page
from salary_scraper.parsers.letter_page import parse_letter_page
from salary_scraper.parsers.table import parse_table

__all__ = [
    "ParserConfig",
    "parse_footnote",
    "parse_index_page",
    "parse_job_page",
    "parse_letter_page",
    "parse_table",
]
