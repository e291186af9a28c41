"""
Data models for the salary scraper.
"""

from salary_scraper.models.result import IssueKind, ParseIssue, ParseResult
from salary_scraper.models.salary import (
    FieldMap,
    FootnoteMap,
    JobStub,
    PageIndexEntry,
    SalaryRecord,
)

__all__ = [
    "FieldMap",
    "FootnoteMap",
    "IssueKind",
    "JobStub",
    "PageIndexEntry",
    "ParseIssue",
    "ParseResult",
    "SalaryRecord",
]
