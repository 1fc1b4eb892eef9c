"""JSON reporter for machine-readable output.

Stdlib-only reporter. Output follows ESLint's ``json`` formatter layout
(one object per file with ``messages``), so existing CI tooling can read it.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from envcheck.application.reporters._base import BaseReporter, display_column
from envcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from envcheck.domain.model.diagnostic import Diagnostic
    from envcheck.domain.model.lint_result import FileResult, LintResult

# ESLint numeric severities
_SEVERITY_LEVELS = {
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, result: LintResult) -> str:
        """Report lint results as JSON.

        Args:
            result: Complete lint result

        Returns:
            JSON array, newline terminated
        """
        data = [self._file_to_dict(f) for f in result.files]
        return json.dumps(data, indent=self._indent) + "\n"

    def _file_to_dict(self, file_result: FileResult) -> dict[str, object]:
        """Convert FileResult to JSON-serializable dict."""
        return {
            "filePath": str(file_result.path),
            "messages": [self._diagnostic_to_dict(d) for d in file_result.diagnostics],
            "errorCount": file_result.error_count,
            "warningCount": file_result.warning_count,
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict.

        Columns are 1-based in the output, ESTree columns are 0-based.
        """
        location = diagnostic.location
        data: dict[str, object] = {
            "ruleId": diagnostic.rule_id,
            "messageId": diagnostic.message_id,
            "severity": _SEVERITY_LEVELS[diagnostic.severity],
            "message": diagnostic.message,
            "line": location.line,
            "column": display_column(location),
        }
        if location.end_line is not None and location.end_column is not None:
            data["endLine"] = location.end_line
            data["endColumn"] = location.end_column + 1
        return data
