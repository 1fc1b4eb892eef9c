"""Base rule class for ESTree rules.

Provides default implementation of RuleProtocol.
Concrete rules inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Mapping

    from envcheck.domain.model.rule_meta import RuleMeta
    from envcheck.domain.ports.rule import Handler, RuleContextProtocol


class BaseRule(ABC):
    """Base class for rules implementing RuleProtocol.

    Concrete rules must:
    1. Set `meta` class attribute
    2. Implement `create()` method
    3. Override `from_options()` if the rule takes options
    """

    meta: RuleMeta
    """Rule metadata (id, messages, schema)."""

    @property
    def rule_id(self) -> str:
        """Rule identifier."""
        return self.meta.rule_id

    @abstractmethod
    def create(self, context: RuleContextProtocol) -> Mapping[str, Handler]:
        """Start analysis of one file.

        Args:
            context: Host context of this file

        Returns:
            Selector -> handler mapping
        """

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None) -> Self:
        """Create rule from raw options.

        Default: rule takes no options, any non-empty options are rejected.

        Raises:
            RuleValidationError: Options given to a rule without options
        """
        if options:
            from envcheck.domain.exceptions.validation import RuleValidationError

            raise RuleValidationError(cls.meta.rule_id, "rule takes no options")
        return cls()
