"""
Footnote parser.

Converts the metadata line under a salary table::

    "Country: USA | Currency: USD | Updated: 1 Jan 2016 | Individuals Reporting: 180"

into::

    {"country": "USA", "currency": "USD", "updated": 1451606400, "individuals_reporting": 180.0}
"""

import re
from datetime import datetime, timezone
from typing import Optional, Union

import structlog

from salary_scraper.models.result import IssueKind, ParseResult
from salary_scraper.models.salary import FootnoteMap
from salary_scraper.parsers.text import to_field_name

logger = structlog.get_logger()

FIELD_SEPARATOR = "|"
PAIR_SEPARATOR = ":"

# "1 Jan 2016", also accepting full month names
DATE_FORMATS = ("%d %b %Y", "%d %B %Y")

# Plain decimals only: no "inf", "nan" or "1_000"
_plain_number_re = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*", re.ASCII)


def as_number(value: str) -> Optional[float]:
    """Return the value as a float after dropping thousands separators, or None."""
    cleaned = value.replace(",", "")
    if not _plain_number_re.fullmatch(cleaned):
        return None
    return float(cleaned)


def as_epoch_seconds(value: str) -> Optional[int]:
    """Return a "D MMM YYYY" date as seconds since the epoch (UTC midnight), or None."""
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return int(parsed.replace(tzinfo=timezone.utc).timestamp())
    return None


def classify_value(value: str) -> Union[float, int, str]:
    """Number first, then date, then the text itself. First match wins."""
    number = as_number(value)
    if number is not None:
        return number

    epoch = as_epoch_seconds(value)
    if epoch is not None:
        return epoch

    return value


def parse_footnote(text: Optional[str]) -> ParseResult[FootnoteMap]:
    """
    Parse a pipe-separated list of "label: value" pairs.

    Args:
        text: Footnote text, possibly surrounded by whitespace.

    Returns:
        ParseResult wrapping a flat {field_name: value} map. Segments with no
        ":" are stored as "" and reported as MALFORMED_FOOTNOTE.
    """
    result: ParseResult[FootnoteMap] = ParseResult(value={})

    text = (text or "").strip()
    if not text:
        return result

    for segment in text.split(FIELD_SEPARATOR):
        if not segment.strip():
            continue

        label, separator, raw_value = segment.partition(PAIR_SEPARATOR)
        field = to_field_name(label)

        if not separator:
            result.add(IssueKind.MALFORMED_FOOTNOTE, field, f"no '{PAIR_SEPARATOR}' in {segment.strip()!r}")
            logger.debug("Malformed footnote segment", segment=segment.strip())
            result.value[field] = ""
            continue

        result.value[field] = classify_value(raw_value.strip())

    return result
