"""Rule registry: the plugin index.

Central mapping of rule ids to rule classes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from envcheck.application.rules.require_force_dynamic import RequireForceDynamicForEnv
from envcheck.domain.exceptions.validation import RuleValidationError
from envcheck.domain.model.lint_config import LintConfig, RuleSetting

if TYPE_CHECKING:
    from collections.abc import Mapping

    from envcheck.application.rules._base import BaseRule


# Read-only view: registration happens here, not at runtime
RULES: Mapping[str, type[BaseRule]] = MappingProxyType(
    {
        RequireForceDynamicForEnv.meta.rule_id: RequireForceDynamicForEnv,
    }
)


def get_rule(rule_id: str) -> type[BaseRule]:
    """Look up rule class by id.

    Raises:
        RuleValidationError: Unknown rule id (FAIL-FIRST)
    """
    try:
        return RULES[rule_id]
    except KeyError:
        known = ", ".join(sorted(RULES))
        raise RuleValidationError(rule_id, f"unknown rule, known rules: {known}") from None


def default_config() -> LintConfig:
    """Configuration enabling every recommended rule at ERROR with default options."""
    return LintConfig(
        rules={
            rule_id: RuleSetting()
            for rule_id, rule_cls in RULES.items()
            if rule_cls.meta.recommended
        }
    )
