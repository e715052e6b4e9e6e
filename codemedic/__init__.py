"""codemedic: static health reports for .NET repositories."""

from __future__ import annotations

__version__ = "0.1.0"

from codemedic.metrics import RepositoryMetrics, compute_metrics  # noqa: F401,E402
from codemedic.models import Package, ProjectRecord  # noqa: F401,E402
from codemedic.report.builder import build_report  # noqa: F401,E402
from codemedic.scanner.repository import RepositoryScanner, scan_repository  # noqa: F401,E402
