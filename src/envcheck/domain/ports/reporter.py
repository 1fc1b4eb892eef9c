"""Reporter protocol for output formatting.

Users extend envcheck by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from envcheck.domain.model.lint_result import LintResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    envcheck provides ConsoleReporter, PlainTextReporter and JSONReporter.
    Output is str, not print(). Caller decides destination.

    Example:
        class CountReporter:
            def report(self, result: LintResult) -> str:
                return f"{result.problem_count} problem(s)\\n"
    """

    def report(self, result: LintResult) -> str:
        """Format lint results.

        Args:
            result: Complete lint result

        Returns:
            Formatted output
        """
        ...
