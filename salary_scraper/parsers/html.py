"""
Structured queries over a parsed HTML tree.

Pages are parsed once with BeautifulSoup and queried with small frozen
dataclasses instead of selector strings, so each lookup a parser performs
can be described in an issue and tested on its own.
"""

from dataclasses import dataclass
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag


def load_document(html: Optional[str], parser: str = "lxml") -> BeautifulSoup:
    """Parse markup into a tree. ``None`` is treated as an empty page."""
    return BeautifulSoup(html or "", parser)


def element_text(element: Optional[Tag]) -> str:
    """Concatenated text of an element and its descendants, "" for None."""
    if element is None:
        return ""
    return element.get_text()


def child_positions(parent: Tag) -> dict[int, int]:
    """Map id() of each child element to its 1-based position among its siblings."""
    elements = (child for child in parent.children if isinstance(child, Tag))
    return {id(child): position for position, child in enumerate(elements, start=1)}


def at_or_after(elements: list[Tag], min_position: int) -> list[Tag]:
    """
    Keep elements whose sibling position is at least ``min_position``
    (``nth-child(n+k)``). Each parent's children are enumerated once.
    """
    if min_position <= 1:
        return list(elements)

    positions: dict[int, dict[int, int]] = {}
    kept = []
    for element in elements:
        parent = element.parent
        if id(parent) not in positions:
            positions[id(parent)] = child_positions(parent)
        if positions[id(parent)][id(element)] >= min_position:
            kept.append(element)
    return kept


@dataclass(frozen=True)
class Step:
    """Match an element by tag name, class and/or id."""

    tag: Optional[str] = None
    css_class: Optional[str] = None
    element_id: Optional[str] = None

    def matches(self, element: Tag) -> bool:
        if self.tag is not None and element.name != self.tag:
            return False
        if self.css_class is not None and self.css_class not in (element.get("class") or []):
            return False
        if self.element_id is not None and element.get("id") != self.element_id:
            return False
        return True

    def __str__(self) -> str:
        text = self.tag or ""
        if self.element_id:
            text += f"#{self.element_id}"
        if self.css_class:
            text += f".{self.css_class}"
        return text or "*"


@dataclass(frozen=True)
class DescendantQuery:
    """
    Elements matching ``target`` nested (at any depth) inside ``ancestors``.

    Ancestors are listed outermost first, like a descendant combinator
    chain. ``min_position`` keeps only elements whose position among their
    siblings is at least that value (``nth-child(n+k)``).
    """

    target: Step
    ancestors: tuple[Step, ...] = ()
    min_position: int = 1

    def select(self, root: Tag) -> list[Tag]:
        """Matching elements in document order."""
        matches = [
            element
            for element in root.find_all(self.target.tag or True)
            if self.target.matches(element) and self._inside_ancestors(element)
        ]
        return at_or_after(matches, self.min_position)

    def _inside_ancestors(self, element: Tag) -> bool:
        remaining = len(self.ancestors) - 1
        for parent in element.parents:
            if remaining < 0:
                break
            if self.ancestors[remaining].matches(parent):
                remaining -= 1
        return remaining < 0

    def describe(self) -> str:
        parts = [str(step) for step in self.ancestors] + [str(self.target)]
        text = " ".join(parts)
        if self.min_position > 1:
            text += f":nth-child(n+{self.min_position})"
        return text


@dataclass(frozen=True)
class TableQuery:
    """
    Rows of the ``table_index``-th table inside the element with
    ``container_id``, skipping rows positioned before ``first_row``.
    """

    container_id: str
    table_index: int = 0
    first_row: int = 2

    def rows(self, root: Union[BeautifulSoup, Tag]) -> list[Tag]:
        container = root.find(id=self.container_id)
        if container is None:
            return []

        tables = container.find_all("table")
        if self.table_index >= len(tables):
            return []

        return at_or_after(tables[self.table_index].find_all("tr"), self.first_row)

    def describe(self) -> str:
        return f"#{self.container_id} table[{self.table_index}] tr:nth-child(n+{self.first_row})"
