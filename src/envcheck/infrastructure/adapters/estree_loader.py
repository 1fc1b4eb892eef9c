"""ESTree JSON loader.

Reads trees produced by an external parser (typescript-estree, espree,
acorn with locations). envcheck never parses JS/TS source itself.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from envcheck.domain.exceptions.parsing import ParsingError

if TYPE_CHECKING:
    from pathlib import Path

    from envcheck.domain.ports.rule import Node

logger = logging.getLogger(__name__)


def load_program(path: Path) -> Node:
    """Load ESTree Program from JSON file.

    FAIL-FIRST: raises ParsingError on file errors, JSON errors, wrong root.

    Args:
        path: Path to ESTree JSON document

    Returns:
        Program node

    Raises:
        ParsingError: If file cannot be read or is not an ESTree Program
    """
    # Read file - FAIL-FIRST on file errors
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ParsingError(path, "file not found") from e
    except PermissionError as e:
        raise ParsingError(path, "permission denied") from e
    except IsADirectoryError as e:
        raise ParsingError(path, "is a directory") from e
    except UnicodeDecodeError as e:
        raise ParsingError(path, f"encoding error: {e}") from e

    logger.debug("loaded %s (%d bytes)", path, len(text))
    return load_program_text(text, path)


def load_program_text(text: str, path: Path) -> Node:
    """Decode ESTree Program from JSON text.

    Args:
        text: JSON document
        path: Source path, for error messages and locations

    Returns:
        Program node

    Raises:
        ParsingError: Invalid JSON or root is not a Program
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    match data:
        case {"type": "Program", "body": [*_]}:
            return data
        case {"type": str(other)} if other != "Program":
            raise ParsingError(path, f"root node must be Program, got {other}")

    raise ParsingError(path, "root must be an ESTree Program object")
