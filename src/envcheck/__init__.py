"""envcheck - static check for server-only env reads in statically rendered Next.js modules."""

__version__ = "0.1.0"

from envcheck.application.rules.require_force_dynamic import RequireForceDynamicForEnv
from envcheck.application.services.linter import Linter
from envcheck.domain.model.configuration import RuleConfiguration
from envcheck.domain.model.lint_config import LintConfig, RuleSetting

__all__ = [
    "Linter",
    "LintConfig",
    "RequireForceDynamicForEnv",
    "RuleConfiguration",
    "RuleSetting",
    "__version__",
]
