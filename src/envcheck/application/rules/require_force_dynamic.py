"""require-force-dynamic-for-env rule.

A Next.js server module without ``export const dynamic = "force-dynamic"``
is rendered once at build time and cached. Any server-only env value it
reads is frozen at its build-time value. This rule flags such reads.

Two phases per file:
    collect: detectors fill an AnalysisState while the tree is walked
    decide: Program:exit derives the verdict from that state alone

The verdict cannot be streamed: a force-dynamic export after the accesses
still exempts them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from envcheck.application.rules._base import BaseRule
from envcheck.domain.model.configuration import (
    DEFAULT_ENV_SOURCE,
    DEFAULT_SERVER_ONLY_PATTERN,
    ENV_SOURCE_OPTION,
    SERVER_ONLY_PATTERN_OPTION,
    RuleConfiguration,
)
from envcheck.domain.model.enums import RuleType
from envcheck.domain.model.rule_meta import RuleMeta
from envcheck.domain.model.state import AccessSite, AnalysisState
from envcheck.infrastructure.estree.nodes import identifier_name, make_location, string_literal_value

if TYPE_CHECKING:
    from collections.abc import Mapping

    from envcheck.domain.ports.rule import Handler, Node, RuleContextProtocol

logger = logging.getLogger(__name__)

RULE_ID = "require-force-dynamic-for-env"
MISSING_FORCE_DYNAMIC = "missingForceDynamic"

CLIENT_DIRECTIVE = "use client"
DYNAMIC_EXPORT_NAME = "dynamic"
FORCE_DYNAMIC = "force-dynamic"

META = RuleMeta(
    rule_id=RULE_ID,
    type=RuleType.PROBLEM,
    description=(
        "Require `export const dynamic = 'force-dynamic'` "
        "when using server-only environment variables"
    ),
    category="Best Practices",
    recommended=True,
    messages={
        MISSING_FORCE_DYNAMIC: (
            "Server-only environment variable '{{varName}}' is used without "
            "`export const dynamic = 'force-dynamic'`. "
            "This component will be statically rendered and only capture build-time values. "
            "Either add `export const dynamic = 'force-dynamic'` "
            "or use this variable in a dynamic component."
        ),
    },
    schema=(
        {
            "type": "object",
            "properties": {
                ENV_SOURCE_OPTION: {
                    "type": "string",
                    "description": "The import source for env variables (e.g., '@/env')",
                    "default": DEFAULT_ENV_SOURCE,
                },
                SERVER_ONLY_PATTERN_OPTION: {
                    "type": "string",
                    "description": "Regex pattern to match server-only env variable names",
                    "default": DEFAULT_SERVER_ONLY_PATTERN,
                },
            },
            "additionalProperties": False,
        },
    ),
)


# =============================================================================
# DETECTORS - pure functions over single nodes
# =============================================================================


def is_client_directive(program: Node) -> bool:
    """Check if the module's first statement is the "use client" directive.

    Only body[0] counts, as in Next.js.
    """
    match program.get("body"):
        case [{"type": "ExpressionStatement", "expression": expression}, *_]:
            return string_literal_value(expression) == CLIENT_DIRECTIVE
    return False


def env_import_alias(node: Node, env_source: str) -> str | None:
    """Local name of the first named specifier importing from env_source.

    Default (``import env from``) and namespace (``import * as env from``)
    specifiers are not tracked.

    Args:
        node: ImportDeclaration node
        env_source: Configured import path

    Returns:
        Local binding name, or None if the import does not qualify
    """
    if string_literal_value(node.get("source")) != env_source:
        return None

    for specifier in node.get("specifiers") or ():
        match specifier:
            case {"type": "ImportSpecifier", "local": local}:
                if name := identifier_name(local):
                    return name
    return None


def declares_force_dynamic(node: Node) -> bool:
    """Check for ``export const dynamic = "force-dynamic"``.

    Any declaration kind (const/let/var) counts. Re-exports
    (``export { dynamic } from``) are not followed.

    Args:
        node: ExportNamedDeclaration node
    """
    match node.get("declaration"):
        case {"type": "VariableDeclaration", "declarations": [*declarators]}:
            return any(_is_force_dynamic_declarator(d) for d in declarators)
    return False


def _is_force_dynamic_declarator(declarator: Any) -> bool:
    match declarator:
        case {"id": target, "init": init}:
            return (
                identifier_name(target) == DYNAMIC_EXPORT_NAME
                and string_literal_value(init) == FORCE_DYNAMIC
            )
    return False


def static_member_access(node: Node) -> tuple[str, Node] | None:
    """Split ``object.property`` into object name and property node.

    Computed access (``env[name]``, ``env["NAME"]``) is not recognized.

    Args:
        node: MemberExpression node

    Returns:
        (object identifier name, property Identifier node), or None
    """
    if node.get("computed"):
        return None

    object_name = identifier_name(node.get("object"))
    prop = node.get("property")
    if object_name is None or identifier_name(prop) is None:
        return None

    return object_name, prop


def offending_sites(state: AnalysisState) -> tuple[AccessSite, ...]:
    """Decide which access sites to report.

    Decision table, evaluated once per file:
        client directive            -> nothing (out of scope)
        force-dynamic export        -> nothing (re-evaluated per request)
        otherwise                   -> every private access site

    One diagnostic per site, not per unique name.

    Args:
        state: Fully collected state of one file

    Returns:
        Private access sites to report, in document order
    """
    if state.is_client_directive_seen:
        return ()
    if state.is_force_dynamic_seen:
        return ()
    return state.private_sites


# =============================================================================
# SESSION - per-file collector wired to traversal callbacks
# =============================================================================


class _EnvAccessSession:
    """Collects env accesses of one file, then reports at Program:exit.

    Lives for exactly one traversal. Owns its AnalysisState.
    """

    def __init__(self, config: RuleConfiguration, context: RuleContextProtocol) -> None:
        self._config = config
        self._context = context
        self.state = AnalysisState()

    def handlers(self) -> dict[str, Handler]:
        return {
            "Program": self.on_program,
            "ImportDeclaration": self.on_import,
            "ExportNamedDeclaration": self.on_export,
            "MemberExpression": self.on_member,
            "Program:exit": self.on_program_exit,
        }

    def on_program(self, node: Node) -> None:
        if is_client_directive(node):
            self.state.mark_client_directive()
            logger.debug("%s: client directive", self._context.file_path)

    def on_import(self, node: Node) -> None:
        alias = env_import_alias(node, self._config.env_source)
        if alias is None:
            return

        if self.state.track_alias(alias):
            logger.debug("%s: tracking env alias '%s'", self._context.file_path, alias)
        else:
            logger.debug(
                "%s: ignoring second env import '%s', already tracking '%s'",
                self._context.file_path,
                alias,
                self.state.tracked_alias_name,
            )

    def on_export(self, node: Node) -> None:
        if declares_force_dynamic(node):
            self.state.mark_force_dynamic()
            logger.debug("%s: force-dynamic export", self._context.file_path)

    def on_member(self, node: Node) -> None:
        alias = self.state.tracked_alias_name
        if alias is None:
            return

        access = static_member_access(node)
        if access is None:
            return

        object_name, prop = access
        if object_name != alias:
            return

        name = prop["name"]
        self.state.record_access(
            AccessSite(
                property_name=name,
                location=make_location(prop, self._context.file_path),
                is_private=self._config.is_server_only(name),
            )
        )

    def on_program_exit(self, node: Node) -> None:
        sites = offending_sites(self.state)
        logger.debug(
            "%s: %d access(es), %d private, reporting %d",
            self._context.file_path,
            len(self.state.access_sites),
            len(self.state.private_sites),
            len(sites),
        )
        for site in sites:
            self._context.report(
                site.location,
                MISSING_FORCE_DYNAMIC,
                {"varName": site.property_name},
            )


class RequireForceDynamicForEnv(BaseRule):
    """Server-only env reads require ``export const dynamic = "force-dynamic"``.

    Holds immutable options only, so one instance serves any number of
    files, concurrently too. Per-file state is created by create().
    """

    meta = META

    def __init__(self, config: RuleConfiguration | None = None) -> None:
        """Initialize rule.

        Args:
            config: Rule options. Uses defaults if None.
        """
        self._config = config if config is not None else RuleConfiguration()

    @property
    def config(self) -> RuleConfiguration:
        """Rule options."""
        return self._config

    def create(self, context: RuleContextProtocol) -> Mapping[str, Handler]:
        """Start analysis of one file with a fresh AnalysisState."""
        return _EnvAccessSession(self._config, context).handlers()

    @classmethod
    def from_options(cls, options: Mapping[str, object] | None) -> Self:
        """Create rule from ``envSource`` / ``serverOnlyPattern`` options.

        Raises:
            RuleValidationError: Options violate the schema
        """
        return cls(RuleConfiguration.from_options(options, rule_name=RULE_ID))
