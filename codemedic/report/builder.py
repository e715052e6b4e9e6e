"""Assembles the repository health report document."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from ..models import ProjectRecord
from ..metrics import RepositoryMetrics, compute_metrics
from .model import (
    ItemList,
    KeyValueList,
    Paragraph,
    ReportDocument,
    ReportElement,
    ReportSection,
    Table,
    TextStyle,
)

DEFAULT_TITLE = "Repository Health Dashboard"
DEFAULT_PACKAGE_PREVIEW = 5

SUMMARY = "Summary"
PROJECTS = "Projects"
PROJECT_DETAILS = "Project Details"
NOTICE = "Notice"
PARSE_ERRORS = "Parse Errors"

PROJECT_TABLE_HEADERS = ("Name", "Path", "Framework", "Output Type", "Packages", "Settings")
SETTINGS_LEGEND = "Legend: N=Nullable, U=ImplicitUsings, D=Documentation"
NO_PROJECTS_MESSAGE = "⚠ No .NET projects found in the repository."

_UNKNOWN = "unknown"


def _or_unknown(value: Optional[str]) -> str:
    return _UNKNOWN if value is None else value


def _check(enabled: bool) -> str:
    return "✓" if enabled else "✗"


def _check_style(enabled: bool) -> TextStyle:
    return TextStyle.SUCCESS if enabled else TextStyle.WARNING


def _gap_style(count: int) -> TextStyle:
    # Nonzero means at least one project still has something to act on.
    return TextStyle.SUCCESS if count > 0 else TextStyle.WARNING


def settings_codes(record: ProjectRecord) -> str:
    """Return the compact settings cell, e.g. ``"✓N ✓U"`` or ``"-"``."""
    codes: List[str] = []
    if record.nullable_enabled:
        codes.append("✓N")
    if record.implicit_usings_enabled:
        codes.append("✓U")
    if record.generates_documentation:
        codes.append("✓D")
    return " ".join(codes) if codes else "-"


def package_preview(record: ProjectRecord, limit: int = DEFAULT_PACKAGE_PREVIEW) -> List[str]:
    """Format up to ``limit`` packages plus a trailing overflow item."""
    if limit < 0:
        raise ValueError(f"package preview limit must be non-negative, got {limit}")
    packages = record.package_dependencies
    items = [str(package) for package in packages[:limit]]
    if len(packages) > limit:
        items.append(f"... and {len(packages) - limit} more")
    return items


def _summary_section(metrics: RepositoryMetrics) -> ReportSection:
    total = metrics.total_projects
    elements: List[ReportElement] = [
        Paragraph(
            f"Found {total} project(s)",
            TextStyle.BOLD if total > 0 else TextStyle.WARNING,
        )
    ]
    if total > 0:
        elements.append(
            KeyValueList.of(
                [
                    ("Total Packages", str(metrics.total_packages)),
                    (
                        "Projects without Nullable",
                        str(metrics.without_nullable),
                        _gap_style(metrics.without_nullable),
                    ),
                    (
                        "Projects without Implicit Usings",
                        str(metrics.without_implicit_usings),
                        _gap_style(metrics.without_implicit_usings),
                    ),
                    (
                        "Projects missing Documentation",
                        str(metrics.missing_documentation),
                        _gap_style(metrics.missing_documentation),
                    ),
                ]
            )
        )
    return ReportSection(title=SUMMARY, level=1, elements=elements)


def _projects_section(records: Sequence[ProjectRecord]) -> ReportSection:
    rows = [
        (
            record.project_name,
            record.relative_path,
            _or_unknown(record.target_framework),
            _or_unknown(record.output_type),
            str(len(record.package_dependencies)),
            settings_codes(record),
        )
        for record in records
    ]
    return ReportSection(
        title=PROJECTS,
        level=1,
        elements=(
            Table(headers=PROJECT_TABLE_HEADERS, rows=rows, title="Projects Summary"),
            Paragraph(SETTINGS_LEGEND, TextStyle.DIM),
        ),
    )


def _project_detail(record: ProjectRecord, preview: int) -> ReportSection:
    elements: List[ReportElement] = [
        KeyValueList.of(
            [
                ("Path", record.relative_path),
                ("Output Type", _or_unknown(record.output_type)),
                ("Target Framework", _or_unknown(record.target_framework)),
                (
                    "Language Version",
                    "default" if record.language_version is None else record.language_version,
                ),
                (
                    "Nullable Enabled",
                    _check(record.nullable_enabled),
                    _check_style(record.nullable_enabled),
                ),
                (
                    "Implicit Usings",
                    _check(record.implicit_usings_enabled),
                    _check_style(record.implicit_usings_enabled),
                ),
                (
                    "Documentation",
                    _check(record.generates_documentation),
                    _check_style(record.generates_documentation),
                ),
            ]
        )
    ]

    if record.package_dependencies:
        elements.append(
            ItemList(
                items=package_preview(record, preview),
                title=f"Packages ({len(record.package_dependencies)})",
            )
        )

    if record.project_reference_count > 0:
        elements.append(
            Paragraph(f"Project References: {record.project_reference_count}", TextStyle.INFO)
        )

    return ReportSection(title=record.project_name, level=2, elements=elements)


def _details_section(records: Sequence[ProjectRecord], preview: int) -> ReportSection:
    return ReportSection(
        title=PROJECT_DETAILS,
        level=1,
        elements=[_project_detail(record, preview) for record in records],
    )


def _notice_section() -> ReportSection:
    return ReportSection(
        title=NOTICE,
        level=1,
        elements=(Paragraph(NO_PROJECTS_MESSAGE, TextStyle.WARNING),),
    )


def _errors_section(failed: Sequence[ProjectRecord]) -> ReportSection:
    return ReportSection(
        title=PARSE_ERRORS,
        level=1,
        elements=[
            ItemList(items=record.parse_errors, title=record.project_name) for record in failed
        ],
    )


def build_report(
    records: Sequence[ProjectRecord],
    metrics: RepositoryMetrics | None = None,
    *,
    title: str = DEFAULT_TITLE,
    metadata: Mapping[str, str] | None = None,
    package_preview_limit: int = DEFAULT_PACKAGE_PREVIEW,
) -> ReportDocument:
    """Build the health report for ``records``.

    Sections are always emitted in the same order: Summary, then either
    Projects and Project Details or a Notice when nothing was found, then
    Parse Errors when any record carries diagnostics. The function reads no
    clock and touches no files, so equal inputs give equal documents.
    """
    if package_preview_limit < 0:
        raise ValueError(
            f"package preview limit must be non-negative, got {package_preview_limit}"
        )
    records = tuple(records)
    if metrics is None:
        metrics = compute_metrics(records)

    sections: List[ReportSection] = [_summary_section(metrics)]
    if metrics.total_projects > 0:
        sections.append(_projects_section(records))
        sections.append(_details_section(records, package_preview_limit))
    else:
        sections.append(_notice_section())

    if metrics.projects_with_errors:
        sections.append(_errors_section(metrics.projects_with_errors))

    document_metadata: Dict[str, str] = dict(metadata or {})
    return ReportDocument(title=title, metadata=document_metadata, sections=sections)


__all__ = [
    "DEFAULT_PACKAGE_PREVIEW",
    "DEFAULT_TITLE",
    "NOTICE",
    "NO_PROJECTS_MESSAGE",
    "PARSE_ERRORS",
    "PROJECTS",
    "PROJECT_DETAILS",
    "PROJECT_TABLE_HEADERS",
    "SETTINGS_LEGEND",
    "SUMMARY",
    "build_report",
    "package_preview",
    "settings_codes",
]
