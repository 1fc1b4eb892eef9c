"""Per-file, per-rule host context: the rule's reporting sink."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from envcheck.domain.model.diagnostic import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from envcheck.domain.model.enums import Severity
    from envcheck.domain.model.location import Location
    from envcheck.domain.model.rule_meta import RuleMeta

_PLACEHOLDER = re.compile(r"\{\{([^{}]+?)\}\}")


def interpolate(template: str, data: Mapping[str, str] | None) -> str:
    """Substitute ``{{ name }}`` placeholders.

    Unknown placeholders are left verbatim.

    Args:
        template: Message template
        data: Substitutions

    Returns:
        Formatted message
    """
    if not data:
        return template

    def _replace(match: re.Match[str]) -> str:
        term = match.group(1).strip()
        if term in data:
            return str(data[term])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


class RuleContext:
    """Implements RuleContextProtocol for one rule on one file.

    Collects diagnostics; never raises on a violation.
    """

    def __init__(self, meta: RuleMeta, severity: Severity, file_path: Path) -> None:
        """Initialize context.

        Args:
            meta: Metadata of the rule being run
            severity: Severity from the rule setting
            file_path: File being analyzed
        """
        if file_path is None:
            raise TypeError("file_path must not be None")

        self._meta = meta
        self._severity = severity
        self._file_path = file_path
        self._diagnostics: list[Diagnostic] = []

    @property
    def file_path(self) -> Path:
        """File being analyzed."""
        return self._file_path

    @property
    def rule_id(self) -> str:
        """Id of the rule this context serves."""
        return self._meta.rule_id

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Diagnostics reported so far, in report order."""
        return tuple(self._diagnostics)

    def report(
        self,
        location: Location,
        message_id: str,
        data: Mapping[str, str] | None = None,
    ) -> None:
        """Record a diagnostic.

        Raises:
            RuleValidationError: Rule reported an undeclared message id
        """
        template = self._meta.template(message_id)
        self._diagnostics.append(
            Diagnostic(
                rule_id=self._meta.rule_id,
                message_id=message_id,
                message=interpolate(template, data),
                location=location,
                severity=self._severity,
                data=dict(data or {}),
            )
        )
