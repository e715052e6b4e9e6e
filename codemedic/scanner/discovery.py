"""Project file discovery."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from ..logging import get_logger

DEFAULT_PATTERNS: tuple[str, ...] = ("*.csproj",)

_logger = get_logger("scanner.discovery")


def _normalise_excludes(patterns: Sequence[str]) -> List[str]:
    normalised: List[str] = []
    for pattern in patterns:
        cleaned = pattern.strip().strip("/")
        if cleaned:
            normalised.append(cleaned)
    return normalised


def _is_excluded(rel_dir: str, name: str, excludes: Sequence[str]) -> bool:
    rel_path = f"{rel_dir}/{name}" if rel_dir else name
    for pattern in excludes:
        if "/" in pattern:
            if fnmatchcase(rel_path, pattern):
                return True
        elif fnmatchcase(name, pattern):
            return True
    return False


def iter_project_files(
    root: Path,
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    exclude: Sequence[str] = (),
) -> Iterator[Path]:
    """Yield absolute paths of project files below ``root``.

    Directory read errors are logged and the walk moves on. A missing or
    unreadable root therefore yields nothing rather than raising.
    """
    root = Path(root).expanduser().resolve()
    excludes = _normalise_excludes(exclude)

    def _on_error(error: OSError) -> None:
        _logger.warning("Error scanning repository: %s", error)

    if not root.is_dir():
        _logger.warning("Error scanning repository: %s is not a directory", root)
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        dirnames[:] = sorted(
            name for name in dirnames if not _is_excluded(rel_dir, name, excludes)
        )

        for filename in sorted(filenames):
            if any(fnmatchcase(filename, pattern) for pattern in patterns):
                yield current_dir / filename


def discover_project_files(
    root: Path | str,
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    exclude: Sequence[str] = (),
) -> List[Path]:
    """Return every project file below ``root``; partial results on failure."""
    found: List[Path] = []
    try:
        for path in iter_project_files(Path(root), patterns, exclude):
            found.append(path)
    except Exception as exc:  # noqa: BLE001
        _logger.warning("Error scanning repository: %s", exc)
    _logger.debug("Discovered %d project file(s) under %s", len(found), root)
    return found


__all__ = ["DEFAULT_PATTERNS", "discover_project_files", "iter_project_files"]
