"""Rule metadata."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from envcheck.domain.exceptions.validation import RuleValidationError

if TYPE_CHECKING:
    from envcheck.domain.model.enums import RuleType


@dataclass(frozen=True, slots=True)
class RuleMeta:
    """Static description of a rule.

    Attributes:
        rule_id: Rule identifier (kebab-case)
        type: Rule kind
        description: One-line description for docs
        category: Docs category
        recommended: Enabled by the default configuration
        messages: message id -> template with ``{{name}}`` slots
        schema: Options schema (one entry per positional option)
    """

    rule_id: str
    type: RuleType
    description: str
    category: str
    recommended: bool
    messages: Mapping[str, str]
    schema: tuple[Mapping[str, object], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.description:
            raise ValueError("description must not be empty")
        if not self.messages:
            raise ValueError("messages must not be empty")
        for message_id, template in self.messages.items():
            if not template:
                raise ValueError(f"message '{message_id}' has empty template")

    def template(self, message_id: str) -> str:
        """Look up a message template.

        Raises:
            RuleValidationError: If the rule declares no such message
        """
        try:
            return self.messages[message_id]
        except KeyError:
            raise RuleValidationError(self.rule_id, f"unknown message id '{message_id}'") from None
