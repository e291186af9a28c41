"""
Alphabetical index page parser (A | B | C | ... | Z).
"""

from typing import Optional

import structlog

from salary_scraper.models.result import IssueKind, ParseResult
from salary_scraper.models.salary import PageIndexEntry
from salary_scraper.parsers.config import ParserConfig, apply_limit, resolve_config
from salary_scraper.parsers.html import DescendantQuery, Step, load_document

logger = structlog.get_logger()

LETTER_LINKS = DescendantQuery(
    target=Step(tag="a"),
    ancestors=(Step(css_class="rcindex"), Step(css_class="rcIndexBrowse")),
)


def parse_index_page(
    html: Optional[str],
    config: Optional[ParserConfig] = None,
) -> ParseResult[dict[str, PageIndexEntry]]:
    """
    Get the list of letter pages to process.

    Args:
        html: Body of the index page.
        config: Base URL and letter limit; defaults to application settings.

    Returns:
        ParseResult wrapping {letter: PageIndexEntry}. A letter seen twice
        keeps the later link.
    """
    config = resolve_config(config)
    soup = load_document(html, config.html_parser)
    result: ParseResult[dict[str, PageIndexEntry]] = ParseResult(value={})

    anchors = LETTER_LINKS.select(soup)
    if not anchors:
        result.add(IssueKind.SELECTOR_MISS, LETTER_LINKS.describe(), "no letter links")
        logger.debug("Selector miss", query=LETTER_LINKS.describe(), page="index")
        return result

    for anchor in apply_limit(anchors, config.letter_limit):
        letter = anchor.get_text().strip()
        href = anchor.get("href") or ""
        result.value[letter] = PageIndexEntry(id=letter, self_url=config.base_url + href)

    logger.debug("Parsed index page", letters=len(result.value), anchors=len(anchors))
    return result
