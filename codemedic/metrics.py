"""Repository-wide health metrics derived from scanned project records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import ProjectRecord


@dataclass(frozen=True)
class RepositoryMetrics:
    """Aggregated counts across every scanned project."""

    total_projects: int = 0
    total_packages: int = 0
    nullable_enabled: int = 0
    implicit_usings_enabled: int = 0
    documentation_enabled: int = 0
    projects_with_errors: Tuple[ProjectRecord, ...] = ()

    @property
    def without_nullable(self) -> int:
        return self.total_projects - self.nullable_enabled

    @property
    def without_implicit_usings(self) -> int:
        return self.total_projects - self.implicit_usings_enabled

    @property
    def missing_documentation(self) -> int:
        return self.total_projects - self.documentation_enabled


def compute_metrics(records: Iterable[ProjectRecord]) -> RepositoryMetrics:
    """Compute metrics for ``records`` without modifying them.

    Package references are summed per project; the same package used by two
    projects counts twice.
    """
    projects = tuple(records)
    return RepositoryMetrics(
        total_projects=len(projects),
        total_packages=sum(len(p.package_dependencies) for p in projects),
        nullable_enabled=sum(1 for p in projects if p.nullable_enabled),
        implicit_usings_enabled=sum(1 for p in projects if p.implicit_usings_enabled),
        documentation_enabled=sum(1 for p in projects if p.generates_documentation),
        projects_with_errors=tuple(p for p in projects if p.has_errors),
    )


__all__ = ["RepositoryMetrics", "compute_metrics"]
