"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity. A disabled rule has no severity at all."""

    ERROR = auto()  # fails the run
    WARNING = auto()  # reported, run still passes


class RuleType(Enum):
    """Rule kind, as published in rule metadata."""

    PROBLEM = "problem"  # code that will misbehave
    SUGGESTION = "suggestion"  # code that could be done better
    LAYOUT = "layout"  # formatting only
