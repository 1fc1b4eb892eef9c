"""Reporters: LintResult → str.

- ConsoleReporter: rich, grouped per file
- PlainTextReporter: one line per diagnostic
- JSONReporter: ESLint-compatible JSON
"""

from envcheck.application.reporters._base import BaseReporter
from envcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from envcheck.application.reporters.json_reporter import JSONReporter
from envcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
