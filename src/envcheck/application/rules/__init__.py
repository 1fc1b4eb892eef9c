"""ESTree rules.

- RequireForceDynamicForEnv: server-only env reads need force-dynamic
"""

from envcheck.application.rules._base import BaseRule
from envcheck.application.rules._registry import RULES, default_config, get_rule
from envcheck.application.rules.require_force_dynamic import RequireForceDynamicForEnv

__all__ = [
    # Base
    "BaseRule",
    # Rules
    "RequireForceDynamicForEnv",
    # Registry
    "RULES",
    "default_config",
    "get_rule",
]
