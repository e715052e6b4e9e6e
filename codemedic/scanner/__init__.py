"""Project discovery and metadata extraction."""

from __future__ import annotations

from .discovery import DEFAULT_PATTERNS, discover_project_files
from .extractor import extract_project

__all__ = ["DEFAULT_PATTERNS", "discover_project_files", "extract_project"]
