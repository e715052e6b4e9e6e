"""Core data models shared across codemedic components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

UNKNOWN = "unknown"
DEFAULT_OUTPUT_TYPE = "Library"


@dataclass(frozen=True)
class Package:
    """A package dependency declared by a project."""

    name: str = UNKNOWN
    version: str = UNKNOWN

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"


@dataclass(frozen=True)
class ProjectRecord:
    """Metadata extracted from a single project file.

    Identity fields are always populated. Every other field carries a default
    so that a record for an unreadable project is still well formed; in that
    case ``parse_errors`` explains what went wrong and ``output_type`` stays
    ``None``. Parsed records always carry an output type.
    """

    project_path: str
    project_name: str
    relative_path: str
    target_framework: Optional[str] = None
    output_type: Optional[str] = None
    nullable_enabled: bool = False
    implicit_usings_enabled: bool = False
    language_version: Optional[str] = None
    generates_documentation: bool = False
    package_dependencies: Tuple[Package, ...] = field(default_factory=tuple)
    project_reference_count: int = 0
    parse_errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return f"{self.project_name} ({self.relative_path})"

    @property
    def has_errors(self) -> bool:
        return bool(self.parse_errors)


@dataclass(frozen=True)
class ParsedProject:
    """Extraction outcome for a project file that was read successfully."""

    record: ProjectRecord

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FailedProject:
    """Extraction outcome for a project file that could not be read.

    The record only holds identity fields plus the failure message.
    """

    record: ProjectRecord
    error: str

    @property
    def ok(self) -> bool:
        return False


ExtractionResult = Union[ParsedProject, FailedProject]
