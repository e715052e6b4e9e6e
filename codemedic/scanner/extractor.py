"""Project file metadata extraction."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from ..logging import get_logger
from ..models import (
    DEFAULT_OUTPUT_TYPE,
    UNKNOWN,
    ExtractionResult,
    FailedProject,
    Package,
    ParsedProject,
    ProjectRecord,
)

_logger = get_logger("scanner.extractor")


class XmlNamespace:
    """Qualifies element names with a document's default namespace."""

    def __init__(self, uri: str | None = None) -> None:
        self.uri = uri or ""

    @classmethod
    def of(cls, element: ET.Element) -> "XmlNamespace":
        match = re.match(r"\{(.+)}", element.tag)
        return cls(match.group(1) if match else None)

    def qualify(self, name: str) -> str:
        return f"{{{self.uri}}}{name}" if self.uri else name

    def child_text(self, parent: ET.Element, name: str) -> Optional[str]:
        child = parent.find(self.qualify(name))
        if child is None:
            return None
        return child.text or ""

    def first(self, root: ET.Element, name: str) -> Optional[ET.Element]:
        return next(root.iter(self.qualify(name)), None)

    def all(self, root: ET.Element, name: str) -> List[ET.Element]:
        return list(root.iter(self.qualify(name)))


def _is_token(value: Optional[str], token: str) -> bool:
    return value is not None and value.lower() == token


def _identity(path: Path, root: Path) -> dict:
    return {
        "project_path": str(path),
        "project_name": path.stem,
        "relative_path": os.path.relpath(path, root),
    }


def parse_project(path: Path, root: Path) -> ProjectRecord:
    """Parse ``path`` into a record, raising on unreadable or malformed input."""
    identity = _identity(path, root)
    # An empty file raises ParseError ("no element found") here.
    document_root = ET.parse(path).getroot()
    ns = XmlNamespace.of(document_root)

    settings: dict = {"output_type": DEFAULT_OUTPUT_TYPE}
    property_group = ns.first(document_root, "PropertyGroup")
    if property_group is not None:
        output_type = ns.child_text(property_group, "OutputType")
        if output_type and output_type.strip():
            settings["output_type"] = output_type
        settings.update({
            "target_framework": ns.child_text(property_group, "TargetFramework"),
            "nullable_enabled": _is_token(ns.child_text(property_group, "Nullable"), "enable"),
            "implicit_usings_enabled": _is_token(
                ns.child_text(property_group, "ImplicitUsings"), "enable"
            ),
            "language_version": ns.child_text(property_group, "LangVersion"),
            "generates_documentation": _is_token(
                ns.child_text(property_group, "GenerateDocumentationFile"), "true"
            ),
        })

    packages = tuple(
        Package(
            name=reference.get("Include", UNKNOWN),
            version=reference.get("Version", UNKNOWN),
        )
        for reference in ns.all(document_root, "PackageReference")
    )
    project_references = len(ns.all(document_root, "ProjectReference"))

    return ProjectRecord(
        **identity,
        **settings,
        package_dependencies=packages,
        project_reference_count=project_references,
    )


def extract_project(path: Path | str, root: Path | str) -> ExtractionResult:
    """Extract one project record, isolating any failure into the record."""
    path = Path(path)
    root = Path(root)
    try:
        record = parse_project(path, root)
    except Exception as exc:  # noqa: BLE001
        message = str(exc)
        _logger.warning("Failed to parse %s: %s", path, message)
        return FailedProject(
            record=ProjectRecord(**_identity(path, root), parse_errors=(message,)),
            error=message,
        )

    _logger.debug(
        "Parsed %s: framework=%s packages=%d",
        record.display_name,
        record.target_framework,
        len(record.package_dependencies),
    )
    return ParsedProject(record=record)


__all__ = ["XmlNamespace", "extract_project", "parse_project"]
