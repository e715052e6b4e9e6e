"""Render contract shared by every report renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..model import (
    ItemList,
    KeyValueList,
    Paragraph,
    ReportDocument,
    ReportElement,
    ReportSection,
    Table,
)

T = TypeVar("T")


class ElementVisitor(ABC, Generic[T]):
    """Dispatches each report element variant to a dedicated method.

    Subclasses must handle every variant; anything outside the closed element
    set is rejected with ``TypeError``.
    """

    def visit(self, element: ReportElement) -> T:
        if isinstance(element, ReportSection):
            return self.visit_section(element)
        if isinstance(element, Paragraph):
            return self.visit_paragraph(element)
        if isinstance(element, Table):
            return self.visit_table(element)
        if isinstance(element, ItemList):
            return self.visit_list(element)
        if isinstance(element, KeyValueList):
            return self.visit_key_value_list(element)
        raise TypeError(f"Unsupported report element: {type(element).__name__}")

    @abstractmethod
    def visit_section(self, section: ReportSection) -> T:
        """Render a section together with its nested elements."""

    @abstractmethod
    def visit_paragraph(self, paragraph: Paragraph) -> T:
        """Render a styled paragraph."""

    @abstractmethod
    def visit_table(self, table: Table) -> T:
        """Render a table, header first, rows in order."""

    @abstractmethod
    def visit_list(self, item_list: ItemList) -> T:
        """Render a bulleted list."""

    @abstractmethod
    def visit_key_value_list(self, kv_list: KeyValueList) -> T:
        """Render key/value pairs."""


class ReportRenderer(ABC):
    """Turns a report document into presentation text.

    Implementations keep section and element order exactly as built.
    """

    name: str = ""

    @abstractmethod
    def render(self, document: ReportDocument) -> str:
        """Return the rendered document."""
