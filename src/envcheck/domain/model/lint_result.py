"""Lint results per file and per run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from envcheck.domain.model.diagnostic import Diagnostic
from envcheck.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class FileResult:
    """Diagnostics of one analyzed file.

    Attributes:
        path: Analyzed file
        diagnostics: Diagnostics sorted by location
    """

    path: Path
    diagnostics: tuple[Diagnostic, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def clean(self) -> bool:
        """True if nothing was reported."""
        return not self.diagnostics


@dataclass(frozen=True, slots=True)
class LintResult:
    """Result of one lint run. Used by ReporterProtocol.report().

    Attributes:
        files: Per-file results, in input order
    """

    files: tuple[FileResult, ...]

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All diagnostics, file by file."""
        return tuple(d for f in self.files for d in f.diagnostics)

    @property
    def file_count(self) -> int:
        """Number of analyzed files."""
        return len(self.files)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(f.error_count for f in self.files)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(f.warning_count for f in self.files)

    @property
    def problem_count(self) -> int:
        """Errors plus warnings."""
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def passed(self) -> bool:
        """True if no ERROR diagnostics. Warnings do not fail a run."""
        return self.error_count == 0

    @classmethod
    def empty(cls) -> LintResult:
        """Create empty result (passed, no files)."""
        return cls(files=())
