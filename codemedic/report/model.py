"""Renderer-agnostic report tree.

A :class:`ReportDocument` holds ordered :class:`ReportSection` objects, each of
which holds an ordered tuple of elements. The element set is closed:
:class:`Paragraph`, :class:`Table`, :class:`ItemList`, :class:`KeyValueList`
and nested :class:`ReportSection` instances. Nothing in this module knows about
repositories or projects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union


class TextStyle(str, Enum):
    """Semantic emphasis hints. Renderers decide how each one looks."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    DIM = "dim"


@dataclass(frozen=True)
class Paragraph:
    """A run of text with a single style."""

    text: str
    style: TextStyle = TextStyle.NORMAL


@dataclass(frozen=True)
class Table:
    """Tabular data; every row must be as wide as the header."""

    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()
    title: Optional[str] = None

    def __post_init__(self) -> None:
        headers = tuple(self.headers)
        rows = tuple(tuple(row) for row in self.rows)
        for index, row in enumerate(rows):
            if len(row) != len(headers):
                raise ValueError(
                    f"Table row {index} has {len(row)} cells; expected {len(headers)}"
                )
        object.__setattr__(self, "headers", headers)
        object.__setattr__(self, "rows", rows)


@dataclass(frozen=True)
class ItemList:
    """A bulleted list of plain strings."""

    items: Tuple[str, ...] = ()
    title: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class KeyValueItem:
    key: str
    value: str
    style: TextStyle = TextStyle.NORMAL


@dataclass(frozen=True)
class KeyValueList:
    """Labelled values, each with its own value style."""

    items: Tuple[KeyValueItem, ...] = ()
    title: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(
        cls,
        entries: Iterable[Union[Tuple[str, str], Tuple[str, str, TextStyle]]],
        *,
        title: Optional[str] = None,
    ) -> "KeyValueList":
        """Build a list from ``(key, value)`` or ``(key, value, style)`` tuples."""
        return cls(items=tuple(KeyValueItem(*entry) for entry in entries), title=title)


@dataclass(frozen=True)
class ReportSection:
    """A titled group of elements; sections may nest inside other sections."""

    title: str
    level: int = 1
    elements: Tuple["ReportElement", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def iter_sections(self) -> Iterator["ReportSection"]:
        """Yield nested sections in document order."""
        for element in self.elements:
            if isinstance(element, ReportSection):
                yield element


ReportElement = Union[Paragraph, Table, ItemList, KeyValueList, ReportSection]


@dataclass(frozen=True)
class ReportDocument:
    """Top-level report: a title, string metadata and ordered sections."""

    title: str
    metadata: Mapping[str, str] = field(default_factory=dict)
    sections: Tuple[ReportSection, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        object.__setattr__(self, "sections", tuple(self.sections))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReportDocument):
            return NotImplemented
        return (
            self.title == other.title
            and list(self.metadata.items()) == list(other.metadata.items())
            and self.sections == other.sections
        )

    def __hash__(self) -> int:
        return hash((self.title, tuple(self.metadata.items()), self.sections))

    def section(self, title: str) -> Optional[ReportSection]:
        """Return the first top-level section with ``title``, if any."""
        for section in self.sections:
            if section.title == title:
                return section
        return None

    @property
    def section_titles(self) -> Sequence[str]:
        return [section.title for section in self.sections]


__all__ = [
    "ItemList",
    "KeyValueItem",
    "KeyValueList",
    "Paragraph",
    "ReportDocument",
    "ReportElement",
    "ReportSection",
    "Table",
    "TextStyle",
]
