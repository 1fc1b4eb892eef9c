"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from envcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from envcheck.domain.model.lint_result import LintResult
    from envcheck.domain.model.location import Location

SEVERITY_LABELS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
}


def display_column(location: Location) -> int:
    """1-based column, as editors and ESLint output show it."""
    return location.column + 1


def format_position(location: Location) -> str:
    """Format location as line:column for display."""
    return f"{location.line}:{display_column(location)}"


def format_summary(result: LintResult) -> str:
    """One-line problem count summary."""
    if result.problem_count == 0:
        return f"No problems found in {result.file_count} file(s)"
    return (
        f"{result.problem_count} problem(s) "
        f"({result.error_count} error(s), {result.warning_count} warning(s))"
    )


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.
    Output is str, not print(). Caller decides destination.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: LintResult) -> str:
                return f"Problems: {result.problem_count}\\n"
    """

    @abstractmethod
    def report(self, result: LintResult) -> str:
        """Format lint results.

        Args:
            result: Complete lint result

        Returns:
            Formatted output
        """
