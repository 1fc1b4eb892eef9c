"""Run configuration: which rules are enabled, at what severity, with what options."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from envcheck.domain.exceptions.validation import ConfigurationError, RuleValidationError
from envcheck.domain.model.enums import Severity

# ESLint-compatible severity levels; None = rule disabled
_LEVELS: Mapping[str | int, Severity | None] = MappingProxyType(
    {
        "off": None,
        "warn": Severity.WARNING,
        "error": Severity.ERROR,
        0: None,
        1: Severity.WARNING,
        2: Severity.ERROR,
    }
)


def parse_level(rule_id: str, raw: object) -> Severity | None:
    """Parse an ESLint severity level.

    Args:
        rule_id: Rule id used in error messages
        raw: "off" | "warn" | "error" | 0 | 1 | 2

    Returns:
        Severity, or None if the rule is turned off

    Raises:
        RuleValidationError: Unknown level
    """
    # bool is an int subclass: True must not pass as 1
    if isinstance(raw, bool) or not isinstance(raw, str | int) or raw not in _LEVELS:
        raise RuleValidationError(rule_id, f"invalid severity {raw!r}, expected off/warn/error or 0/1/2")
    return _LEVELS[raw]


@dataclass(frozen=True, slots=True)
class RuleSetting:
    """Severity and options for one enabled rule.

    Attributes:
        severity: Severity of reported diagnostics
        options: Raw rule options, validated by the rule itself
    """

    severity: Severity = Severity.ERROR
    options: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be Severity, got {type(self.severity).__name__}")
        if not isinstance(self.options, Mapping):
            raise TypeError(f"options must be Mapping, got {type(self.options).__name__}")

    @classmethod
    def parse(cls, rule_id: str, raw: object) -> RuleSetting | None:
        """Parse ESLint-style rule setting.

        Accepted forms: ``"error"``, ``2``, ``["warn", {...options}]``.

        Returns:
            RuleSetting, or None if the rule is turned off

        Raises:
            RuleValidationError: Malformed setting
        """
        if isinstance(raw, Sequence) and not isinstance(raw, str):
            if not raw:
                raise RuleValidationError(rule_id, "setting list must start with a severity")
            if len(raw) > 2:
                raise RuleValidationError(rule_id, "setting list takes a severity and one options object")
            severity = parse_level(rule_id, raw[0])
            options = raw[1] if len(raw) == 2 else {}
            if not isinstance(options, Mapping):
                raise RuleValidationError(rule_id, "options must be an object")
        else:
            severity = parse_level(rule_id, raw)
            options = {}

        if severity is None:
            return None
        return cls(severity=severity, options=dict(options))


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Immutable run configuration.

    Attributes:
        rules: Enabled rules, rule id -> setting. Disabled rules are absent.
    """

    rules: Mapping[str, RuleSetting] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for rule_id, setting in self.rules.items():
            if not rule_id:
                raise ValueError("rule id must not be empty")
            if not isinstance(setting, RuleSetting):
                raise TypeError(f"setting for '{rule_id}' must be RuleSetting")

    def with_rule(self, rule_id: str, setting: RuleSetting | None) -> LintConfig:
        """Return copy with one rule replaced (None disables it)."""
        rules = dict(self.rules)
        if setting is None:
            rules.pop(rule_id, None)
        else:
            rules[rule_id] = setting
        return LintConfig(rules=rules)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> LintConfig:
        """Build configuration from a decoded config document.

        Expected shape: ``{"rules": {"<rule-id>": <setting>, ...}}``.

        Raises:
            ConfigurationError: Wrong document shape or empty rule id
            RuleValidationError: Malformed rule setting
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("configuration must be an object")

        unknown = sorted(str(key) for key in data if key != "rules")
        if unknown:
            raise ConfigurationError(f"unknown key(s): {', '.join(unknown)}")

        raw_rules = data.get("rules", {})
        if not isinstance(raw_rules, Mapping):
            raise ConfigurationError("'rules' must be an object")

        rules: dict[str, RuleSetting] = {}
        for rule_id, raw in raw_rules.items():
            if not isinstance(rule_id, str) or not rule_id:
                raise ConfigurationError(f"rule ids must be non-empty strings, got {rule_id!r}")
            setting = RuleSetting.parse(rule_id, raw)
            if setting is not None:
                rules[rule_id] = setting

        return cls(rules=rules)
