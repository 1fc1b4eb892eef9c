"""Domain exceptions."""

from envcheck.domain.exceptions.base import EnvCheckError
from envcheck.domain.exceptions.parsing import ASTError, ParsingError
from envcheck.domain.exceptions.validation import ConfigurationError, RuleValidationError
from envcheck.domain.exceptions.violation import ViolationsFoundError

__all__ = [
    "EnvCheckError",
    "ParsingError",
    "ASTError",
    "ConfigurationError",
    "RuleValidationError",
    "ViolationsFoundError",
]
