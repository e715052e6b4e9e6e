"""Configuration loading for codemedic (.codemedic.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .report.builder import DEFAULT_PACKAGE_PREVIEW, DEFAULT_TITLE
from .scanner.discovery import DEFAULT_PATTERNS

CONFIG_FILENAME = ".codemedic.yml"
REPORT_FORMATS = ("console", "markdown")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanConfig:
    """Which files count as projects and which directories to skip."""

    patterns: List[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class ReportConfig:
    """Report presentation defaults."""

    format: str = "console"
    title: str = DEFAULT_TITLE
    package_preview: int = DEFAULT_PACKAGE_PREVIEW


@dataclass
class CodeMedicConfig:
    """Represents the settings defined in .codemedic.yml."""

    root: Path
    scan: ScanConfig = field(default_factory=ScanConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_config(config_path: Path) -> CodeMedicConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CodeMedicConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    scan = ScanConfig()
    scan_data = _as_dict(data.get("scan"))
    if scan_data:
        patterns = _as_str_list(scan_data.get("patterns"))
        if patterns:
            scan.patterns = patterns
        scan.exclude_paths = _as_str_list(scan_data.get("exclude_paths"))

    report = ReportConfig()
    report_data = _as_dict(data.get("report"))
    if report_data:
        fmt = _as_str(report_data.get("format"))
        if fmt is not None:
            fmt = fmt.lower()
            if fmt not in REPORT_FORMATS:
                raise ConfigError(
                    f"Unsupported report format '{fmt}'; expected one of {', '.join(REPORT_FORMATS)}"
                )
            report.format = fmt
        title = _as_str(report_data.get("title"))
        if title:
            report.title = title
        preview = _as_int(report_data.get("package_preview"))
        if preview is not None and preview >= 0:
            report.package_preview = preview

    return CodeMedicConfig(root=root, scan=scan, report=report)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_file():
        return config_path.resolve()
    # Anything else names the repository directory, even one that is missing.
    return (config_path / CONFIG_FILENAME).resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CodeMedicConfig",
    "ConfigError",
    "REPORT_FORMATS",
    "ReportConfig",
    "ScanConfig",
    "load_config",
]
