"""Markdown rendering backed by Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

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

_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def style_markdown(text: str, style: TextStyle) -> str:
    """Apply markdown emphasis for ``style``; semantic styles stay plain."""
    if not text:
        return text
    if style in (TextStyle.BOLD, TextStyle.ERROR):
        return f"**{text}**"
    if style in (TextStyle.ITALIC, TextStyle.DIM):
        return f"_{text}_"
    if style is TextStyle.CODE:
        return f"`{text}`"
    return text


class _MarkdownBlocks(ElementVisitor[List[str]]):
    """Flattens the element tree into markdown blocks separated by blank lines."""

    def visit_section(self, section: ReportSection) -> List[str]:
        depth = min(section.level + 1, 6)
        blocks = [f"{'#' * depth} {section.title}"]
        for element in section.elements:
            blocks.extend(self.visit(element))
        return blocks

    def visit_paragraph(self, paragraph: Paragraph) -> List[str]:
        return [style_markdown(paragraph.text, paragraph.style)]

    def visit_table(self, table: Table) -> List[str]:
        lines = [
            "| " + " | ".join(_escape_cell(h) for h in table.headers) + " |",
            "|" + "|".join(" --- " for _ in table.headers) + "|",
        ]
        for row in table.rows:
            lines.append("| " + " | ".join(_escape_cell(cell) for cell in row) + " |")
        blocks = []
        if table.title:
            blocks.append(f"**{table.title}**")
        blocks.append("\n".join(lines))
        return blocks

    def visit_list(self, item_list: ItemList) -> List[str]:
        blocks = []
        if item_list.title:
            blocks.append(f"**{item_list.title}**")
        if item_list.items:
            blocks.append("\n".join(f"- {item}" for item in item_list.items))
        return blocks

    def visit_key_value_list(self, kv_list: KeyValueList) -> List[str]:
        blocks = []
        if kv_list.title:
            blocks.append(f"**{kv_list.title}**")
        if kv_list.items:
            blocks.append(
                "\n".join(
                    f"- **{item.key}**: {style_markdown(item.value, item.style)}"
                    for item in kv_list.items
                )
            )
        return blocks


class MarkdownRenderer(ReportRenderer):
    """Renders reports as GitHub-flavoured markdown."""

    name = "markdown"

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or _TEMPLATES_DIR
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, document: ReportDocument) -> str:
        visitor = _MarkdownBlocks()
        blocks: List[str] = []
        for section in document.sections:
            blocks.extend(visitor.visit(section))
        template = self._env.get_template("report.md.j2")
        rendered = template.render(
            title=document.title,
            metadata=list(document.metadata.items()),
            blocks=blocks,
        )
        return rendered.strip() + "\n"


__all__ = ["MarkdownRenderer", "style_markdown"]
