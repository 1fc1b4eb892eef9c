"""Plain text reporter.

Stdlib-only reporter, one line per diagnostic, greppable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from envcheck.application.reporters._base import (
    SEVERITY_LABELS,
    BaseReporter,
    format_position,
    format_summary,
)

if TYPE_CHECKING:
    from envcheck.domain.model.diagnostic import Diagnostic
    from envcheck.domain.model.lint_result import LintResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    Line format: ``path:line:column: severity message [rule-id]``.
    """

    def report(self, result: LintResult) -> str:
        """Report lint results as plain text.

        Args:
            result: Complete lint result

        Returns:
            Diagnostic lines followed by a summary line
        """
        lines = [self._format(d) for d in result.diagnostics]
        lines.append(format_summary(result))
        return "\n".join(lines) + "\n"

    def _format(self, diagnostic: Diagnostic) -> str:
        """Format one diagnostic line."""
        return (
            f"{diagnostic.location.file}:{format_position(diagnostic.location)}: "
            f"{SEVERITY_LABELS[diagnostic.severity]} {diagnostic.message} "
            f"[{diagnostic.rule_id}]"
        )
