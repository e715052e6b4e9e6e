"""Plain-text console rendering with optional ANSI colour."""

from __future__ import annotations

from typing import Dict, List

from ..model import (
    ItemList,
    KeyValueList,
    Paragraph,
    ReportDocument,
    ReportSection,
    Table,
    TextStyle,
)
from .base import ElementVisitor, ReportRenderer

_ANSI_CODES: Dict[TextStyle, str] = {
    TextStyle.BOLD: "1",
    TextStyle.ITALIC: "3",
    TextStyle.CODE: "36",
    TextStyle.SUCCESS: "32",
    TextStyle.WARNING: "33",
    TextStyle.ERROR: "31",
    TextStyle.INFO: "34",
    TextStyle.DIM: "2",
}
_RESET = "\033[0m"


class _ConsoleLines(ElementVisitor[List[str]]):
    def __init__(self, *, color: bool, indent: str = "  ") -> None:
        self.color = color
        self.indent = indent

    def style(self, text: str, style: TextStyle) -> str:
        code = _ANSI_CODES.get(style)
        if not self.color or code is None or not text:
            return text
        return f"\033[{code}m{text}{_RESET}"

    def _pad(self, level: int) -> str:
        return self.indent * max(level - 1, 0)

    def visit_section(self, section: ReportSection) -> List[str]:
        pad = self._pad(section.level)
        underline = "=" if section.level <= 1 else "-"
        lines = [
            "",
            pad + self.style(section.title, TextStyle.BOLD),
            pad + underline * len(section.title),
        ]
        for element in section.elements:
            rendered = self.visit(element)
            if isinstance(element, ReportSection):
                lines.extend(rendered)
            else:
                lines.extend(f"{pad}{line}" if line else line for line in rendered)
        return lines

    def visit_paragraph(self, paragraph: Paragraph) -> List[str]:
        return [self.style(paragraph.text, paragraph.style)]

    def visit_table(self, table: Table) -> List[str]:
        widths = [len(header) for header in table.headers]
        for row in table.rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], len(cell))

        def _line(cells) -> str:
            return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

        lines: List[str] = []
        if table.title:
            lines.append(self.style(table.title, TextStyle.BOLD))
        lines.append(self.style(_line(table.headers), TextStyle.BOLD))
        lines.append("  ".join("-" * width for width in widths))
        lines.extend(_line(row) for row in table.rows)
        return lines

    def visit_list(self, item_list: ItemList) -> List[str]:
        lines: List[str] = []
        if item_list.title:
            lines.append(self.style(item_list.title, TextStyle.BOLD))
        lines.extend(f"  - {item}" for item in item_list.items)
        return lines

    def visit_key_value_list(self, kv_list: KeyValueList) -> List[str]:
        lines: List[str] = []
        if kv_list.title:
            lines.append(self.style(kv_list.title, TextStyle.BOLD))
        width = max((len(item.key) for item in kv_list.items), default=0)
        for item in kv_list.items:
            lines.append(f"{item.key.ljust(width)} : {self.style(item.value, item.style)}")
        return lines


class ConsoleRenderer(ReportRenderer):
    """Renders reports for a terminal; colour is opt-in."""

    name = "console"

    def __init__(self, *, color: bool = False) -> None:
        self.color = color

    def render(self, document: ReportDocument) -> str:
        visitor = _ConsoleLines(color=self.color)
        lines = [visitor.style(document.title, TextStyle.BOLD)]
        for key, value in document.metadata.items():
            lines.append(visitor.style(f"{key}: {value}", TextStyle.DIM))
        for section in document.sections:
            lines.extend(visitor.visit(section))
        return "\n".join(lines).rstrip() + "\n"


__all__ = ["ConsoleRenderer"]
