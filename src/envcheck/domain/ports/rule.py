"""Rule protocol for ESTree rules.

Users extend envcheck by implementing this Protocol.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, Self, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

    from envcheck.domain.model.location import Location
    from envcheck.domain.model.rule_meta import RuleMeta

# ESTree node: decoded JSON object with a "type" key
Node: TypeAlias = Mapping[str, Any]

Handler: TypeAlias = Callable[[Node], None]


class RuleContextProtocol(Protocol):
    """What a rule sees of the host while one file is traversed."""

    @property
    def file_path(self) -> Path:
        """File being analyzed."""
        ...

    def report(
        self,
        location: Location,
        message_id: str,
        data: Mapping[str, str] | None = None,
    ) -> None:
        """Report a violation to the host sink.

        Args:
            location: Where to point the diagnostic
            message_id: Message id declared in the rule metadata
            data: Template substitutions
        """
        ...


class RuleProtocol(Protocol):
    """Contract for rules.

    A rule instance holds validated, immutable options and may be shared
    between files. All per-file state lives in what create() closes over.

    Selectors are ESTree node types ("MemberExpression") or the node type
    with an ":exit" suffix ("Program:exit"), fired when the node's
    subtree is done.

    Example:
        class NoDebugger:
            meta = RuleMeta(
                rule_id="no-debugger",
                type=RuleType.PROBLEM,
                description="Disallow debugger statements",
                category="Possible Errors",
                recommended=True,
                messages={"unexpected": "Unexpected 'debugger' statement."},
            )

            def create(self, context: RuleContextProtocol) -> Mapping[str, Handler]:
                def on_debugger(node: Node) -> None:
                    context.report(make_location(node, context.file_path), "unexpected")

                return {"DebuggerStatement": on_debugger}

            @classmethod
            def from_options(cls, options: Mapping[str, object] | None) -> Self:
                return cls()
    """

    meta: RuleMeta
    """Rule metadata (id, messages, schema)."""

    def create(self, context: RuleContextProtocol) -> Mapping[str, Handler]:
        """Start analysis of one file.

        Args:
            context: Host context of this file

        Returns:
            Selector -> handler mapping
        """
        ...

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None) -> Self:
        """Create rule from raw options.

        Raises:
            RuleValidationError: Options violate the rule schema
        """
        ...
