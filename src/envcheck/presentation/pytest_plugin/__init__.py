"""pytest plugin for envcheck.

Provides fixtures for linting ESTree documents in tests:
    envcheck_options: Rule options (override in conftest.py)
    envcheck_config: LintConfig with the env rule enabled
    envcheck_linter: Linter built from envcheck_config

And the assert_no_violations() helper.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from envcheck.presentation.pytest_plugin.assertions import assert_no_violations
from envcheck.presentation.pytest_plugin.fixtures import (
    envcheck_config,
    envcheck_linter,
    envcheck_options,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "assert_no_violations",
    "envcheck_config",
    "envcheck_linter",
    "envcheck_options",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "envcheck: mark test as env access lint test",
    )
