"""
Parse results with non-fatal issues attached.

Parsers never raise on unexpected markup. Whatever could not be read is
reported here next to the partial value, so a crawler can alert on
persistent layout changes without aborting a run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class IssueKind(str, Enum):
    """Category of a non-fatal parse issue."""

    SELECTOR_MISS = "selector_miss"
    MISSING_CELL = "missing_cell"
    UNPARSEABLE_NUMBER = "unparseable_number"
    MALFORMED_FOOTNOTE = "malformed_footnote"


@dataclass(frozen=True)
class ParseIssue:
    """A single problem encountered while parsing."""

    kind: IssueKind
    location: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.value} at {self.location}: {self.detail}"
        return f"{self.kind.value} at {self.location}"


@dataclass
class ParseResult(Generic[T]):
    """Parsed value plus the issues met while producing it."""

    value: T
    issues: list[ParseIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def add(self, kind: IssueKind, location: str, detail: str = "") -> None:
        self.issues.append(ParseIssue(kind=kind, location=location, detail=detail))

    def merge(self, other: "ParseResult") -> "ParseResult[T]":
        """Absorb another result's issues, keeping this result's value."""
        self.issues.extend(other.issues)
        return self

    def issues_of(self, kind: IssueKind) -> list[ParseIssue]:
        return [issue for issue in self.issues if issue.kind == kind]
