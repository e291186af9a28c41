"""
Letter page parser: the table of job titles listed under one letter.
"""

from typing import Optional

import structlog
from bs4 import Tag

from salary_scraper.models.result import IssueKind, ParseResult
from salary_scraper.models.salary import JobStub
from salary_scraper.parsers.config import ParserConfig, apply_limit, resolve_config
from salary_scraper.parsers.html import DescendantQuery, Step, element_text, load_document

logger = structlog.get_logger()

# Row 1 of the listing is the header
JOB_ROWS = DescendantQuery(
    target=Step(tag="tr"),
    ancestors=(Step(css_class="rcindex"), Step(tag="table")),
    min_position=2,
)


def _first_link(row: Tag) -> Optional[Tag]:
    for cell in row.find_all("td"):
        link = cell.find("a")
        if link is not None:
            return link
    return None


def parse_letter_page(
    html: Optional[str],
    config: Optional[ParserConfig] = None,
) -> ParseResult[list[JobStub]]:
    """
    Get the list of jobs and their links from one letter page.

    A job's name is the text of the first link in the row's cells, not the
    whole text of the cell holding it, so a cell like
    ``<td><a>Actuary</a> (new)</td>`` yields "Actuary". The last cell gives
    the profile count.

    Args:
        html: Body of one of the A | B | C pages.
        config: Base URL and job limit; defaults to application settings.

    Returns:
        ParseResult wrapping job stubs in row order, each with an empty
        salary record.
    """
    config = resolve_config(config)
    soup = load_document(html, config.html_parser)
    result: ParseResult[list[JobStub]] = ParseResult(value=[])

    rows = JOB_ROWS.select(soup)
    if not rows:
        result.add(IssueKind.SELECTOR_MISS, JOB_ROWS.describe(), "no job rows")
        logger.debug("Selector miss", query=JOB_ROWS.describe(), page="letter")
        return result

    for position, row in enumerate(apply_limit(rows, config.job_limit), start=1):
        link = _first_link(row)
        if link is None:
            result.add(IssueKind.MISSING_CELL, f"row {position}", "no job link")
            logger.debug("Job row without link", row=position)

        cells = row.find_all("td")
        href = (link.get("href") or "") if link is not None else ""

        result.value.append(
            JobStub(
                name=element_text(link).strip(),
                data_profiles_number=element_text(cells[-1] if cells else None).strip(),
                self_url=config.base_url + href,
            )
        )

    logger.debug("Parsed letter page", jobs=len(result.value), rows=len(rows))
    return result
