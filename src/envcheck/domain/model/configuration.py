"""Options of the require-force-dynamic-for-env rule.

Constructed once per rule invocation, read-only afterwards. Safe to share
by reference between files analyzed concurrently.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from envcheck.domain.exceptions.validation import RuleValidationError

DEFAULT_ENV_SOURCE = "@/env"
DEFAULT_SERVER_ONLY_PATTERN = "^(?!NEXT_PUBLIC_).*"

ENV_SOURCE_OPTION = "envSource"
SERVER_ONLY_PATTERN_OPTION = "serverOnlyPattern"

OPTION_NAMES = frozenset({ENV_SOURCE_OPTION, SERVER_ONLY_PATTERN_OPTION})

_DEFAULT_PATTERN = re.compile(DEFAULT_SERVER_ONLY_PATTERN)


@dataclass(frozen=True, slots=True)
class RuleConfiguration:
    """Immutable rule options with FAIL-FIRST validation.

    Attributes:
        env_source: Import path of the env accessor module (e.g. "@/env")
        server_only_pattern: Names it matches (searched, not anchored) are server-only
        predicate: Optional name -> bool classifier. Replaces the pattern when set.
    """

    env_source: str = DEFAULT_ENV_SOURCE
    server_only_pattern: re.Pattern[str] = _DEFAULT_PATTERN
    predicate: Callable[[str], bool] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.env_source, str) or not self.env_source:
            raise ValueError("env_source must be non-empty string")
        if not isinstance(self.server_only_pattern, re.Pattern):
            raise TypeError(
                f"server_only_pattern must be compiled re.Pattern, "
                f"got {type(self.server_only_pattern).__name__}"
            )
        if self.predicate is not None and not callable(self.predicate):
            raise TypeError("predicate must be callable or None")

    def is_server_only(self, name: str) -> bool:
        """Classify an accessed env name.

        Args:
            name: Property name as written after the alias (``env.NAME``)

        Returns:
            True if the name is a private (server-only) value
        """
        if self.predicate is not None:
            return self.predicate(name)
        return self.server_only_pattern.search(name) is not None

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, object] | None,
        *,
        rule_name: str,
    ) -> RuleConfiguration:
        """Build configuration from user options.

        Mirrors the published options schema: both keys optional, both
        strings (empty means default), no additional properties.

        Args:
            options: Raw options mapping (None or empty = all defaults)
            rule_name: Rule id used in error messages

        Returns:
            Validated configuration

        Raises:
            RuleValidationError: Unknown key, non-string value or bad regex
        """
        if options is None:
            return cls()

        if not isinstance(options, Mapping):
            raise RuleValidationError(
                rule_name, f"options must be an object, got {type(options).__name__}"
            )

        unknown = sorted(str(key) for key in options if key not in OPTION_NAMES)
        if unknown:
            raise RuleValidationError(rule_name, f"unknown option(s): {', '.join(unknown)}")

        # Empty strings fall back to the defaults
        env_source = options.get(ENV_SOURCE_OPTION, DEFAULT_ENV_SOURCE)
        if not isinstance(env_source, str):
            raise RuleValidationError(rule_name, f"'{ENV_SOURCE_OPTION}' must be a string")
        env_source = env_source or DEFAULT_ENV_SOURCE

        raw_pattern = options.get(SERVER_ONLY_PATTERN_OPTION, DEFAULT_SERVER_ONLY_PATTERN)
        if not isinstance(raw_pattern, str):
            raise RuleValidationError(rule_name, f"'{SERVER_ONLY_PATTERN_OPTION}' must be a string")
        raw_pattern = raw_pattern or DEFAULT_SERVER_ONLY_PATTERN

        try:
            pattern = re.compile(raw_pattern)
        except re.error as e:
            raise RuleValidationError(
                rule_name,
                f"'{SERVER_ONLY_PATTERN_OPTION}' is not a valid regular expression: {e}",
            ) from e

        return cls(env_source=env_source, server_only_pattern=pattern)
