"""Assertion helpers for lint results in tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from envcheck.domain.exceptions.violation import ViolationsFoundError

if TYPE_CHECKING:
    from envcheck.domain.model.lint_result import FileResult, LintResult


def assert_no_violations(result: LintResult | FileResult) -> None:
    """Fail if the result holds any diagnostic, warnings included.

    Args:
        result: Lint run result or single file result

    Raises:
        ViolationsFoundError: Listing every diagnostic
    """
    if result.diagnostics:
        raise ViolationsFoundError(tuple(result.diagnostics))
