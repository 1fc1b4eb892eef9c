"""Lint configuration file loader.

Config file format (JSON)::

    {
        "rules": {
            "require-force-dynamic-for-env": ["error", {"envSource": "~/env"}]
        }
    }
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from envcheck.domain.exceptions.validation import ConfigurationError
from envcheck.domain.model.lint_config import LintConfig

if TYPE_CHECKING:
    from pathlib import Path


def load_config(path: Path) -> LintConfig:
    """Load LintConfig from JSON file.

    Args:
        path: Config file path

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: Unreadable file, invalid JSON or wrong shape
        RuleValidationError: Malformed rule setting
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"{path}: encoding error: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path}: invalid JSON at line {e.lineno}: {e.msg}") from e

    return LintConfig.from_mapping(data)
