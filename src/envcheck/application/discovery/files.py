"""ESTree document discovery from paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

DEFAULT_PATTERN = "*.estree.json"

# Directories never scanned
DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".next",
        "node_modules",
        "__pycache__",
        ".venv",
    },
)


def discover_files(paths: Iterable[Path], pattern: str = DEFAULT_PATTERN) -> tuple[Path, ...]:
    """Expand paths into ESTree documents to lint.

    Files are taken as given, whatever their name. Directories are scanned
    recursively for pattern, skipping DEFAULT_EXCLUDES.

    Args:
        paths: Files and directories
        pattern: Glob for files inside directories

    Returns:
        Unique paths, files in argument order, directory hits sorted

    Raises:
        FileNotFoundError: If a path does not exist (FAIL-FIRST)
    """
    found: dict[Path, None] = {}

    for path in paths:
        if path.is_file():
            found.setdefault(path, None)
        elif path.is_dir():
            for candidate in sorted(path.rglob(pattern)):
                if DEFAULT_EXCLUDES.intersection(candidate.relative_to(path).parts):
                    continue
                if candidate.is_file():
                    found.setdefault(candidate, None)
        else:
            raise FileNotFoundError(f"no such file or directory: {path}")

    return tuple(found)
