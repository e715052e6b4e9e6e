"""Concrete report renderers."""

from __future__ import annotations

from typing import Callable, Dict

from .base import ElementVisitor, ReportRenderer
from .console import ConsoleRenderer
from .markdown import MarkdownRenderer

_RENDERERS: Dict[str, Callable[..., ReportRenderer]] = {
    "console": ConsoleRenderer,
    "markdown": MarkdownRenderer,
}


def get_renderer(name: str, **options: object) -> ReportRenderer:
    """Return a renderer instance registered under ``name``."""
    try:
        factory = _RENDERERS[name.lower()]
    except KeyError:
        available = ", ".join(sorted(_RENDERERS))
        raise ValueError(f"Unknown report format '{name}'; expected one of {available}") from None
    return factory(**options)


__all__ = [
    "ConsoleRenderer",
    "ElementVisitor",
    "MarkdownRenderer",
    "ReportRenderer",
    "get_renderer",
]
