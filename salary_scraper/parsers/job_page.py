"""
Job detail page parser.

A job page carries up to two salary tables:

- ``#m_summaryReport``: annual salary, bonus, total pay, then a footnote row.
- ``#m_summaryReport_hourly``: hourly rate, overtime, ...

Hourly-only jobs have no ``#m_summaryReport`` container. On those pages the
bonus, total pay and footnote rows sit in a second table inside the hourly
container, so that table is read as the annual one.
"""

from typing import Optional

import structlog
from bs4 import Tag

from salary_scraper.models.result import IssueKind, ParseResult
from salary_scraper.models.salary import SalaryRecord
from salary_scraper.parsers.config import ParserConfig, resolve_config
from salary_scraper.parsers.footnote import parse_footnote
from salary_scraper.parsers.html import TableQuery, load_document
from salary_scraper.parsers.table import parse_table

logger = structlog.get_logger()

ANNUAL_TABLE = TableQuery(container_id="m_summaryReport", table_index=0)
HOURLY_TABLE = TableQuery(container_id="m_summaryReport_hourly", table_index=0)
HOURLY_FALLBACK_TABLE = TableQuery(container_id="m_summaryReport_hourly", table_index=1)


def find_annual_rows(soup) -> tuple[list[Tag], Optional[str]]:
    """
    Locate the annual table rows.

    Returns:
        (rows, source) where source is "annual", "hourly_fallback", or None
        when neither table has rows.
    """
    rows = ANNUAL_TABLE.rows(soup)
    if rows:
        return rows, "annual"

    rows = HOURLY_FALLBACK_TABLE.rows(soup)
    if rows:
        return rows, "hourly_fallback"

    return [], None


def footnote_text(row: Tag) -> str:
    return "".join(cell.get_text() for cell in row.find_all("td"))


def parse_job_page(
    html: Optional[str],
    config: Optional[ParserConfig] = None,
) -> ParseResult[SalaryRecord]:
    """
    Extract annual pay, hourly pay and the footnote from a job page.

    The page is not tied to a job stub; merge the returned record with
    ``JobStub.with_salary``.

    Args:
        html: Body of a job detail page.
        config: Parser configuration; only the tree builder is used here.

    Returns:
        ParseResult wrapping the SalaryRecord. Missing tables leave their
        section empty and add SELECTOR_MISS issues.
    """
    config = resolve_config(config)
    soup = load_document(html, config.html_parser)
    result: ParseResult[SalaryRecord] = ParseResult(value=SalaryRecord())

    annual_rows, source = find_annual_rows(soup)
    if source is None:
        result.add(
            IssueKind.SELECTOR_MISS,
            ANNUAL_TABLE.describe(),
            f"no rows, fallback {HOURLY_FALLBACK_TABLE.describe()} also empty",
        )
        logger.debug("Selector miss", query=ANNUAL_TABLE.describe(), page="job")

    # The last annual row is the footnote, not a salary field
    footnote = parse_footnote(footnote_text(annual_rows[-1])) if annual_rows else ParseResult(value={})
    annual = parse_table(annual_rows[:-1])

    hourly_rows = HOURLY_TABLE.rows(soup)
    if not hourly_rows:
        result.add(IssueKind.SELECTOR_MISS, HOURLY_TABLE.describe(), "no rows")
        logger.debug("Selector miss", query=HOURLY_TABLE.describe(), page="job")
    hourly = parse_table(hourly_rows)

    result.merge(annual).merge(hourly).merge(footnote)
    result.value = SalaryRecord(
        annual=annual.value,
        hourly=hourly.value,
        footnote=footnote.value,
        source=source,
    )

    logger.debug(
        "Parsed job page",
        source=source,
        annual_fields=len(annual.value),
        hourly_fields=len(hourly.value),
        footnote_fields=len(footnote.value),
    )
    return result
