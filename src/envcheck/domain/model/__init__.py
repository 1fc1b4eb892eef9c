"""Domain model entities."""

from envcheck.domain.model.configuration import RuleConfiguration
from envcheck.domain.model.diagnostic import Diagnostic
from envcheck.domain.model.enums import RuleType, Severity
from envcheck.domain.model.lint_config import LintConfig, RuleSetting
from envcheck.domain.model.lint_result import FileResult, LintResult
from envcheck.domain.model.location import Location
from envcheck.domain.model.rule_meta import RuleMeta
from envcheck.domain.model.state import AccessSite, AnalysisState

__all__ = [
    "AccessSite",
    "AnalysisState",
    "Diagnostic",
    "FileResult",
    "LintConfig",
    "LintResult",
    "Location",
    "RuleConfiguration",
    "RuleMeta",
    "RuleSetting",
    "RuleType",
    "Severity",
]
