"""Tests for application/rules/require_force_dynamic.py."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from envcheck.application.rules.require_force_dynamic import (
    META,
    MISSING_FORCE_DYNAMIC,
    RULE_ID,
    RequireForceDynamicForEnv,
    declares_force_dynamic,
    env_import_alias,
    is_client_directive,
    offending_sites,
    static_member_access,
)
from envcheck.application.services.context import RuleContext
from envcheck.domain.exceptions.validation import RuleValidationError
from envcheck.domain.model.configuration import RuleConfiguration
from envcheck.domain.model.enums import RuleType, Severity
from envcheck.domain.model.state import AccessSite, AnalysisState
from envcheck.infrastructure.estree.traversal import Phase, walk
from tests.factories import (
    DEFAULT_TEST_FILE,
    access,
    call,
    class_declaration,
    computed_member,
    constructor_with_decorated_param,
    decorator,
    directive,
    env_import,
    export_const,
    export_named,
    expression_statement,
    force_dynamic_export,
    import_declaration,
    import_default_specifier,
    import_namespace_specifier,
    import_specifier,
    literal,
    make_location,
    member,
    member_of,
    program,
    template_literal,
    variable_declaration,
)


def run_rule(rule: RequireForceDynamicForEnv, tree: dict, path: Path = DEFAULT_TEST_FILE):
    """Drive rule handlers over tree the way the Linter does."""
    context = RuleContext(rule.meta, Severity.ERROR, path)
    handlers = rule.create(context)
    for phase, node in walk(tree):
        selector = node["type"] if phase is Phase.ENTER else node["type"] + ":exit"
        handler = handlers.get(selector)
        if handler is not None:
            handler(node)
    return context.diagnostics


def reported_names(tree: dict, rule: RequireForceDynamicForEnv | None = None) -> list[str]:
    diagnostics = run_rule(rule or RequireForceDynamicForEnv(), tree)
    return [d.data["varName"] for d in diagnostics]


# =============================================================================
# DETECTORS
# =============================================================================


class TestIsClientDirective:
    """Tests for is_client_directive()."""

    def test_first_statement_directive(self) -> None:
        assert is_client_directive(program(directive("use client"), env_import(line=2)))

    def test_directive_not_first_ignored(self) -> None:
        assert not is_client_directive(program(env_import(), directive("use client", line=2)))

    def test_other_directive_ignored(self) -> None:
        assert not is_client_directive(program(directive("use server")))

    def test_template_literal_not_directive(self) -> None:
        tree = program(expression_statement(template_literal("use client")))
        assert not is_client_directive(tree)

    def test_empty_body(self) -> None:
        assert not is_client_directive(program())

    def test_first_statement_not_expression(self) -> None:
        assert not is_client_directive(program(env_import()))


class TestEnvImportAlias:
    """Tests for env_import_alias()."""

    def test_named_import(self) -> None:
        assert env_import_alias(env_import(), "@/env") == "env"

    def test_renamed_import_uses_local_name(self) -> None:
        assert env_import_alias(env_import(local="cfg"), "@/env") == "cfg"

    def test_other_source_ignored(self) -> None:
        assert env_import_alias(env_import(source="./env"), "@/env") is None

    def test_custom_source(self) -> None:
        assert env_import_alias(env_import(source="~/env"), "~/env") == "env"

    def test_first_named_specifier_wins(self) -> None:
        node = import_declaration(
            "@/env",
            import_specifier("env"),
            import_specifier("other"),
        )
        assert env_import_alias(node, "@/env") == "env"

    def test_default_specifier_skipped(self) -> None:
        node = import_declaration("@/env", import_default_specifier("env"))
        assert env_import_alias(node, "@/env") is None

    def test_namespace_specifier_skipped(self) -> None:
        node = import_declaration("@/env", import_namespace_specifier("env"))
        assert env_import_alias(node, "@/env") is None

    def test_default_then_named(self) -> None:
        node = import_declaration(
            "@/env",
            import_default_specifier("defaultEnv"),
            import_specifier("env"),
        )
        assert env_import_alias(node, "@/env") == "env"

    def test_side_effect_import(self) -> None:
        assert env_import_alias(import_declaration("@/env"), "@/env") is None


class TestDeclaresForceDynamic:
    """Tests for declares_force_dynamic()."""

    def test_export_const(self) -> None:
        assert declares_force_dynamic(force_dynamic_export())

    @pytest.mark.parametrize("kind", ["let", "var"])
    def test_any_declaration_kind(self, kind: str) -> None:
        assert declares_force_dynamic(export_const("dynamic", "force-dynamic", kind=kind))

    def test_other_value(self) -> None:
        assert not declares_force_dynamic(export_const("dynamic", "auto"))

    def test_other_name(self) -> None:
        assert not declares_force_dynamic(export_const("revalidate", "force-dynamic"))

    def test_template_literal_value(self) -> None:
        node = export_named(variable_declaration("dynamic", template_literal("force-dynamic")))
        assert not declares_force_dynamic(node)

    def test_without_initializer(self) -> None:
        assert not declares_force_dynamic(export_named(variable_declaration("dynamic", None)))

    def test_export_specifiers_only(self) -> None:
        assert not declares_force_dynamic(export_named(None))

    def test_second_declarator(self) -> None:
        node = export_const("revalidate", 0)
        node["declaration"]["declarations"].append(
            variable_declaration("dynamic", literal("force-dynamic"))["declarations"][0]
        )
        assert declares_force_dynamic(node)


class TestStaticMemberAccess:
    """Tests for static_member_access()."""

    def test_identifier_access(self) -> None:
        result = static_member_access(member("env", "DB_PASSWORD"))
        assert result is not None
        object_name, prop = result
        assert object_name == "env"
        assert prop["name"] == "DB_PASSWORD"

    def test_computed_identifier(self) -> None:
        assert static_member_access(member("env", "key", computed=True)) is None

    def test_computed_string(self) -> None:
        assert static_member_access(computed_member("env", literal("DB_PASSWORD"))) is None

    def test_nested_object(self) -> None:
        assert static_member_access(member_of(member("env", "DB"), "host")) is None


class TestOffendingSites:
    """Tests for offending_sites() decision table."""

    @staticmethod
    def _state(*, client: bool = False, dynamic: bool = False) -> AnalysisState:
        state = AnalysisState()
        state.track_alias("env")
        state.record_access(AccessSite("SECRET", make_location(2, 4), is_private=True))
        state.record_access(AccessSite("NEXT_PUBLIC_URL", make_location(3, 4), is_private=False))
        if client:
            state.mark_client_directive()
        if dynamic:
            state.mark_force_dynamic()
        return state

    def test_static_server_module(self) -> None:
        sites = offending_sites(self._state())
        assert [s.property_name for s in sites] == ["SECRET"]

    def test_client_module(self) -> None:
        assert offending_sites(self._state(client=True)) == ()

    def test_force_dynamic_module(self) -> None:
        assert offending_sites(self._state(dynamic=True)) == ()

    def test_client_and_dynamic(self) -> None:
        assert offending_sites(self._state(client=True, dynamic=True)) == ()

    def test_no_accesses(self) -> None:
        assert offending_sites(AnalysisState()) == ()


# =============================================================================
# RULE BEHAVIOUR
# =============================================================================


class TestClientDirectiveExemption:
    """"use client" as the first statement exempts the whole file."""

    def test_client_component_not_reported(self) -> None:
        tree = program(directive(), env_import(line=2), access("env", "DB_PASSWORD", line=4))
        assert reported_names(tree) == []

    def test_directive_after_import_does_not_exempt(self) -> None:
        tree = program(
            env_import(),
            directive(line=2),
            access("env", "DB_PASSWORD", line=4),
        )
        assert reported_names(tree) == ["DB_PASSWORD"]


class TestForceDynamicExemption:
    """A force-dynamic export anywhere in the module exempts it."""

    def test_declared_before_access(self) -> None:
        tree = program(
            env_import(),
            force_dynamic_export(line=2),
            access("env", "DB_PASSWORD", line=4),
        )
        assert reported_names(tree) == []

    def test_declared_after_access(self) -> None:
        tree = program(
            env_import(),
            access("env", "DB_PASSWORD", line=2),
            force_dynamic_export(line=4),
        )
        assert reported_names(tree) == []

    def test_other_dynamic_value_reports(self) -> None:
        tree = program(
            env_import(),
            export_const("dynamic", "force-static", line=2),
            access("env", "DB_PASSWORD", line=4),
        )
        assert reported_names(tree) == ["DB_PASSWORD"]

    def test_unexported_const_does_not_exempt(self) -> None:
        tree = program(
            env_import(),
            variable_declaration("dynamic", literal("force-dynamic", 2, 16), line=2),
            access("env", "DB_PASSWORD", line=4),
        )
        assert reported_names(tree) == ["DB_PASSWORD"]


class TestReporting:
    """Static server modules report every private access site."""

    def test_single_private_access(self) -> None:
        tree = program(env_import(), access("env", "MY_SERVER_VAR", line=3))
        diagnostics = run_rule(RequireForceDynamicForEnv(), tree)

        assert len(diagnostics) == 1
        diagnostic = diagnostics[0]
        assert diagnostic.rule_id == RULE_ID
        assert diagnostic.message_id == MISSING_FORCE_DYNAMIC
        assert diagnostic.data == {"varName": "MY_SERVER_VAR"}
        assert "'MY_SERVER_VAR'" in diagnostic.message
        assert "force-dynamic" in diagnostic.message
        assert "{{" not in diagnostic.message

    def test_location_is_property_identifier(self) -> None:
        tree = program(env_import(), access("env", "MY_SERVER_VAR", line=3, column=6))
        (diagnostic,) = run_rule(RequireForceDynamicForEnv(), tree)

        assert diagnostic.location.file == DEFAULT_TEST_FILE
        assert diagnostic.location.line == 3
        assert diagnostic.location.column == 10  # after "env."
        assert diagnostic.location.end_column == 10 + len("MY_SERVER_VAR")

    def test_one_diagnostic_per_site(self) -> None:
        tree = program(
            env_import(),
            access("env", "DB_PASSWORD", line=2),
            access("env", "DB_PASSWORD", line=3),
            access("env", "API_KEY", line=4),
        )
        assert reported_names(tree) == ["DB_PASSWORD", "DB_PASSWORD", "API_KEY"]

    def test_report_order_follows_document(self) -> None:
        tree = program(
            env_import(),
            access("env", "B_SECRET", line=2),
            access("env", "A_SECRET", line=3),
        )
        lines = [d.location.line for d in run_rule(RequireForceDynamicForEnv(), tree)]
        assert lines == [2, 3]

    def test_public_variables_not_reported(self) -> None:
        tree = program(
            env_import(),
            access("env", "NEXT_PUBLIC_API_URL", line=2),
            access("env", "DATABASE_URL", line=3),
        )
        assert reported_names(tree) == ["DATABASE_URL"]

    def test_only_public_variables(self) -> None:
        tree = program(env_import(), access("env", "NEXT_PUBLIC_API_URL", line=2))
        assert reported_names(tree) == []

    def test_nested_access_reports_first_segment(self) -> None:
        tree = program(
            env_import(),
            expression_statement(member_of(member("env", "DB", 2), "host", 2, 7)),
        )
        assert reported_names(tree) == ["DB"]

    def test_access_in_class_decorator(self) -> None:
        tree = program(
            env_import(),
            class_declaration(
                "Page",
                decorators=[
                    decorator(call("Inject", member("env", "DB_PASSWORD", 2, 8), line=2, column=1))
                ],
                line=3,
            ),
        )
        assert reported_names(tree) == ["DB_PASSWORD"]

    def test_access_in_parameter_decorator(self) -> None:
        ctor = constructor_with_decorated_param(
            "db",
            decorator(call("Inject", member("env", "DB_URL", 3, 20), line=3, column=13)),
            line=3,
        )
        tree = program(env_import(), class_declaration("Service", ctor, line=2))
        assert reported_names(tree) == ["DB_URL"]

    def test_access_inside_function(self) -> None:
        fetch = call("fetch", member("env", "API_TOKEN", 5, 8), line=5, column=2)
        tree = program(env_import(), expression_statement(fetch))
        assert reported_names(tree) == ["API_TOKEN"]


class TestAliasTracking:
    """Only accesses on the tracked local binding count."""

    def test_renamed_binding(self) -> None:
        tree = program(
            env_import(local="cfg"),
            access("cfg", "SECRET", line=2),
            access("env", "OTHER_SECRET", line=3),
        )
        assert reported_names(tree) == ["SECRET"]

    def test_no_env_import(self) -> None:
        tree = program(access("env", "SECRET", line=2))
        assert reported_names(tree) == []

    def test_import_from_other_source(self) -> None:
        tree = program(env_import(source="./env"), access("env", "SECRET", line=2))
        assert reported_names(tree) == []

    def test_default_import_not_tracked(self) -> None:
        tree = program(
            import_declaration("@/env", import_default_specifier("env")),
            access("env", "SECRET", line=2),
        )
        assert reported_names(tree) == []

    def test_namespace_import_not_tracked(self) -> None:
        tree = program(
            import_declaration("@/env", import_namespace_specifier("env")),
            access("env", "SECRET", line=2),
        )
        assert reported_names(tree) == []

    def test_first_import_wins(self) -> None:
        tree = program(
            env_import(),
            env_import(local="other", line=2),
            access("other", "IGNORED_SECRET", line=3),
            access("env", "TRACKED_SECRET", line=4),
        )
        assert reported_names(tree) == ["TRACKED_SECRET"]

    def test_computed_access_not_reported(self) -> None:
        tree = program(
            env_import(),
            expression_statement(computed_member("env", literal("SECRET", 2, 4), 2)),
            expression_statement(member("env", "key", 3, computed=True)),
        )
        assert reported_names(tree) == []

    def test_access_before_import_not_recorded(self) -> None:
        tree = program(access("env", "SECRET", line=1), env_import(line=2))
        assert reported_names(tree) == []


class TestOptions:
    """envSource / serverOnlyPattern options and predicate."""

    def test_custom_env_source(self) -> None:
        rule = RequireForceDynamicForEnv.from_options({"envSource": "~/config/env"})
        tree = program(
            env_import(source="~/config/env"),
            access("env", "SECRET", line=2),
        )
        assert reported_names(tree, rule) == ["SECRET"]

    def test_custom_env_source_ignores_default(self) -> None:
        rule = RequireForceDynamicForEnv.from_options({"envSource": "~/config/env"})
        tree = program(env_import(), access("env", "SECRET", line=2))
        assert reported_names(tree, rule) == []

    def test_custom_pattern(self) -> None:
        rule = RequireForceDynamicForEnv.from_options({"serverOnlyPattern": "^SECRET_"})
        tree = program(
            env_import(),
            access("env", "SECRET_KEY", line=2),
            access("env", "DATABASE_URL", line=3),
        )
        assert reported_names(tree, rule) == ["SECRET_KEY"]

    def test_pattern_is_searched_not_anchored(self) -> None:
        rule = RequireForceDynamicForEnv.from_options({"serverOnlyPattern": "TOKEN"})
        tree = program(env_import(), access("env", "GITHUB_TOKEN", line=2))
        assert reported_names(tree, rule) == ["GITHUB_TOKEN"]

    def test_predicate(self) -> None:
        config = RuleConfiguration(predicate=lambda name: name.startswith("DB_"))
        tree = program(
            env_import(),
            access("env", "DB_HOST", line=2),
            access("env", "API_KEY", line=3),
        )
        assert reported_names(tree, RequireForceDynamicForEnv(config)) == ["DB_HOST"]

    def test_none_options_use_defaults(self) -> None:
        rule = RequireForceDynamicForEnv.from_options(None)
        assert rule.config.env_source == "@/env"
        assert rule.config.server_only_pattern.pattern == "^(?!NEXT_PUBLIC_).*"

    def test_unknown_option_raises(self) -> None:
        with pytest.raises(RuleValidationError, match="unknown option"):
            RequireForceDynamicForEnv.from_options({"envPath": "@/env"})

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(RuleValidationError, match="not a valid regular expression"):
            RequireForceDynamicForEnv.from_options({"serverOnlyPattern": "(unclosed"})


class TestRuleInstance:
    """Rule metadata and per-file isolation."""

    def test_meta(self) -> None:
        rule = RequireForceDynamicForEnv()
        assert rule.meta is META
        assert rule.rule_id == RULE_ID
        assert META.type == RuleType.PROBLEM
        assert META.recommended is True
        assert MISSING_FORCE_DYNAMIC in META.messages

    def test_schema_defaults(self) -> None:
        properties = META.schema[0]["properties"]
        assert properties["envSource"]["default"] == "@/env"
        assert properties["serverOnlyPattern"]["default"] == "^(?!NEXT_PUBLIC_).*"
        re.compile(properties["serverOnlyPattern"]["default"])

    def test_state_not_shared_between_files(self) -> None:
        rule = RequireForceDynamicForEnv()
        client = program(directive(), env_import(line=2), access("env", "SECRET", line=3))
        dynamic = program(env_import(), force_dynamic_export(line=2), access("env", "SECRET", line=3))
        static = program(env_import(), access("env", "SECRET", line=3))

        assert run_rule(rule, client, Path("a.estree.json")) == ()
        assert run_rule(rule, dynamic, Path("b.estree.json")) == ()
        assert len(run_rule(rule, static, Path("c.estree.json"))) == 1

    def test_create_returns_fresh_handlers(self) -> None:
        rule = RequireForceDynamicForEnv()
        context = RuleContext(rule.meta, Severity.ERROR, DEFAULT_TEST_FILE)
        first = rule.create(context)
        second = rule.create(context)
        assert set(first) == {
            "Program",
            "ImportDeclaration",
            "ExportNamedDeclaration",
            "MemberExpression",
            "Program:exit",
        }
        assert first["Program"] != second["Program"]
