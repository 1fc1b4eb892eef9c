"""pytest fixtures for env access linting.

User overrides envcheck_options in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from envcheck.application.rules.require_force_dynamic import RULE_ID
from envcheck.application.services.linter import Linter
from envcheck.domain.model.lint_config import LintConfig, RuleSetting

if TYPE_CHECKING:
    from collections.abc import Mapping


@pytest.fixture
def envcheck_options() -> Mapping[str, object]:
    """Options for require-force-dynamic-for-env.

    User overrides this fixture in their conftest.py, e.g.::

        @pytest.fixture
        def envcheck_options():
            return {"envSource": "~/env"}

    Returns:
        Empty mapping (rule defaults)
    """
    return {}


@pytest.fixture
def envcheck_config(envcheck_options: Mapping[str, object]) -> LintConfig:
    """Run configuration with the env rule enabled at ERROR.

    Returns:
        LintConfig using envcheck_options
    """
    return LintConfig(rules={RULE_ID: RuleSetting(options=dict(envcheck_options))})


@pytest.fixture
def envcheck_linter(envcheck_config: LintConfig) -> Linter:
    """Linter built from envcheck_config.

    Raises:
        RuleValidationError: If envcheck_options are invalid
    """
    return Linter(envcheck_config)
