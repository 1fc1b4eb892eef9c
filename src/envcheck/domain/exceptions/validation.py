"""Configuration exceptions."""

from envcheck.domain.exceptions.base import EnvCheckError


class ConfigurationError(EnvCheckError):
    """Lint configuration is invalid.

    Raised at setup time, before any file is analyzed.

    Attributes:
        reason: Why configuration is invalid (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class RuleValidationError(ConfigurationError):
    """Error in rule options or rule selection.

    Raised when a rule id is unknown or its options break the rule schema.
    FAIL-FIRST: validates inputs immediately.

    Attributes:
        rule_name: Name of invalid rule (must not be empty)
        reason: Why rule is invalid (must not be empty)
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not rule_name:
            raise ValueError("rule_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_name = rule_name
        self.reason = reason
        EnvCheckError.__init__(self, f"Invalid rule '{rule_name}': {reason}")
