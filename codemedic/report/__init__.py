"""Report document model, builder and renderers."""

from __future__ import annotations

from .builder import build_report
from .model import (
    ItemList,
    KeyValueItem,
    KeyValueList,
    Paragraph,
    ReportDocument,
    ReportElement,
    ReportSection,
    Table,
    TextStyle,
)

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
    "build_report",
]
