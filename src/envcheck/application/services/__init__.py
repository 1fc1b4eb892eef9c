"""Application services."""

from envcheck.application.services.context import RuleContext, interpolate
from envcheck.application.services.linter import Linter

__all__ = ["Linter", "RuleContext", "interpolate"]
