"""
Field name and number helpers shared by the table and footnote parsers.
"""

import math
import re
from typing import Iterable

_non_numeric_re = re.compile(r"[^\d.-]", re.ASCII)
_leading_float_re = re.compile(r"-?(?:\d+\.?\d*|\.\d+)", re.ASCII)


def to_field_name(label: str) -> str:
    """
    Normalize a label into a field name.

    Only the first space becomes an underscore:
    "Total Pay" -> "total_pay", "Individuals Reporting" -> "individuals_reporting".
    """
    return label.strip().replace(" ", "_", 1).lower()


def parse_number(text: str) -> float:
    """
    Convert money-like text to a float.

    Everything but digits, dots and minus signs is dropped, then the leading
    numeric prefix is read ("$61,905.80" -> 61905.8). Returns NaN when no
    digits remain so callers can tell "unparseable" from zero.
    """
    cleaned = _non_numeric_re.sub("", text)
    match = _leading_float_re.match(cleaned)
    if not match:
        return math.nan
    return float(match.group(0))


def parse_numbers(pieces: Iterable[str]) -> list[float]:
    """Convert ["$24,416", "$61,905.80"] to [24416.0, 61905.8]."""
    return [parse_number(piece) for piece in pieces]


def is_unparseable(value) -> bool:
    return isinstance(value, float) and math.isnan(value)
