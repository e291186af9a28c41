"""
Salary scraper: extraction of job titles and pay bands from a salary
comparison site's index, letter and job detail pages.

Fetching pages is left to the caller; every parser takes markup already
retrieved and returns a ParseResult.
"""

from salary_scraper.models import (
    IssueKind,
    JobStub,
    PageIndexEntry,
    ParseIssue,
    ParseResult,
    SalaryRecord,
)
from salary_scraper.parsers import (
    ParserConfig,
    parse_footnote,
    parse_index_page,
    parse_job_page,
    parse_letter_page,
    parse_table,
)

__all__ = [
    "IssueKind",
    "JobStub",
    "PageIndexEntry",
    "ParseIssue",
    "ParseResult",
    "ParserConfig",
    "SalaryRecord",
    "parse_footnote",
    "parse_index_page",
    "parse_job_page",
    "parse_letter_page",
    "parse_table",
]
