"""Reported rule violation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envcheck.domain.model.enums import Severity
    from envcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One violation emitted by a rule.

    Attributes:
        rule_id: Id of the reporting rule
        message_id: Stable message identifier from rule metadata
        message: Template with data substituted
        location: Source location to highlight
        severity: ERROR or WARNING, from the rule setting
        data: Template substitutions (e.g. varName)
    """

    rule_id: str
    message_id: str
    message: str
    location: Location
    severity: Severity
    data: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message_id:
            raise ValueError("message_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")

    def __str__(self) -> str:
        """Format diagnostic for display."""
        return f"{self.location} [{self.severity.name}] {self.rule_id}: {self.message}"
