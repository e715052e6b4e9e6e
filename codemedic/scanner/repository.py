"""Repository scanning: discovery, extraction and report generation."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import CodeMedicConfig
from ..logging import get_logger
from ..metrics import RepositoryMetrics, compute_metrics
from ..models import ExtractionResult, ProjectRecord
from ..report.builder import build_report
from ..report.model import ReportDocument
from .discovery import discover_project_files
from .extractor import extract_project

SCAN_TIME_FORMAT = "%Y-%m-%d %H:%M:%SZ"


class RepositoryScanner:
    """Scans a directory tree for project files and reports on their health."""

    def __init__(
        self,
        root_path: str | Path | None = None,
        config: CodeMedicConfig | None = None,
    ) -> None:
        if root_path is None or not str(root_path).strip():
            self.root = Path.cwd()
        else:
            self.root = Path(root_path).expanduser().resolve()
        self.config = config or CodeMedicConfig(root=self.root)
        self.logger = get_logger("scanner")
        self._projects: List[ProjectRecord] = []
        self._results: List[ExtractionResult] = []

    def scan(self) -> Tuple[ProjectRecord, ...]:
        """Scan the repository and return a snapshot of the discovered projects."""
        self._projects.clear()
        self._results.clear()
        self.logger.info("Scanning %s for projects", self.root)

        paths = discover_project_files(
            self.root,
            patterns=self.config.scan.patterns,
            exclude=self.config.scan.exclude_paths,
        )
        for path in paths:
            result = extract_project(path, self.root)
            self._results.append(result)
            self._projects.append(result.record)

        failures = sum(1 for result in self._results if not result.ok)
        self.logger.info(
            "Scan finished: %d project(s), %d with parse errors", len(self._projects), failures
        )
        return self.projects

    @property
    def projects(self) -> Tuple[ProjectRecord, ...]:
        return tuple(self._projects)

    @property
    def results(self) -> Tuple[ExtractionResult, ...]:
        return tuple(self._results)

    @property
    def project_count(self) -> int:
        return len(self._projects)

    def metrics(self) -> RepositoryMetrics:
        return compute_metrics(self._projects)

    def generate_report(self, *, scan_time: Optional[datetime] = None) -> ReportDocument:
        """Build the report for the last scan, stamped with scan time and root path."""
        timestamp = scan_time or datetime.now(timezone.utc)
        report_config = self.config.report
        return build_report(
            self.projects,
            self.metrics(),
            title=report_config.title,
            metadata={
                "ScanTime": timestamp.strftime(SCAN_TIME_FORMAT),
                "RootPath": str(self.root),
            },
            package_preview_limit=report_config.package_preview,
        )


def scan_repository(
    root_path: str | Path, config: CodeMedicConfig | None = None
) -> Tuple[ProjectRecord, ...]:
    """Convenience wrapper returning the projects found under ``root_path``."""
    return RepositoryScanner(root_path, config=config).scan()


__all__ = ["RepositoryScanner", "SCAN_TIME_FORMAT", "scan_repository"]
