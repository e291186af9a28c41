"""
Salary comparison table parser.

Converts table rows such as::

    +---------------+-------------------+
    | Salary        | $23,966 - $60,278 |
    | Bonus         | $1,750            |
    | Total Pay (?) | $24,416 - $61,905 |
    +---------------+-------------------+

into::

    {"salary": [23966.0, 60278.0], "bonus": [1750.0], "total_pay": [24416.0, 61905.0]}
"""

from typing import Iterable

import structlog
from bs4 import Comment, NavigableString, Tag

from salary_scraper.models.result import IssueKind, ParseResult
from salary_scraper.models.salary import FieldMap
from salary_scraper.parsers.html import element_text
from salary_scraper.parsers.text import is_unparseable, parse_numbers, to_field_name

logger = structlog.get_logger()

RANGE_SEPARATOR = " - "


def row_label(row: Tag) -> str:
    """
    Text of the row's ``th strong`` elements without their child elements.

    The site appends a help icon inside the label (``Total Pay <a>(?)</a>``);
    only the strong's own text nodes are read, leaving the tree untouched.
    """
    parts = []
    for th in row.find_all("th"):
        for strong in th.find_all("strong"):
            for node in strong.children:
                if isinstance(node, NavigableString) and not isinstance(node, Comment):
                    parts.append(str(node))
    return "".join(parts)


def parse_table(rows: Iterable[Tag]) -> ParseResult[FieldMap]:
    """
    Parse label/value rows into a field map.

    The first ``td`` of each row holds the figure, either a single value or
    a "low - high" range. Values that hold no digits are kept as NaN and
    reported as UNPARSEABLE_NUMBER.

    Args:
        rows: ``<tr>`` elements, header row already excluded.

    Returns:
        ParseResult wrapping {field_name: [value]} or {field_name: [low, high]}.
    """
    result: ParseResult[FieldMap] = ParseResult(value={})

    for position, row in enumerate(rows, start=1):
        label = row_label(row)
        field = to_field_name(label)
        if not field:
            result.add(IssueKind.MISSING_CELL, f"row {position}", "no th strong label")

        cell = row.find("td")
        if cell is None:
            result.add(IssueKind.MISSING_CELL, field or f"row {position}", "no value cell")
        text = element_text(cell)

        numbers = parse_numbers(text.split(RANGE_SEPARATOR))
        if any(is_unparseable(n) for n in numbers):
            result.add(IssueKind.UNPARSEABLE_NUMBER, field or f"row {position}", repr(text.strip()))
            logger.debug("Unparseable salary value", field=field, value=text.strip())

        result.value[field] = numbers

    return result
