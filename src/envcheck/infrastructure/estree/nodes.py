"""Base utilities for ESTree nodes.

Nodes are decoded JSON objects (any Mapping) with a "type" key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from envcheck.domain.model.location import Location
    from envcheck.domain.ports.rule import Node


def is_node(value: object) -> bool:
    """Check if value is an ESTree node (mapping with string "type")."""
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


def node_type(node: Node) -> str:
    """Get node type.

    Raises:
        TypeError: If value is not an ESTree node (FAIL-FIRST)
    """
    if not is_node(node):
        raise TypeError(f"expected ESTree node, got {type(node).__name__}")
    return node["type"]


def identifier_name(node: Any) -> str | None:
    """Name of a plain Identifier node, None for anything else."""
    match node:
        case {"type": "Identifier", "name": str(name)}:
            return name
    return None


def string_literal_value(node: Any) -> str | None:
    """Value of a string Literal node, None for anything else.

    Template literals are not string literals here, even without
    expressions.
    """
    match node:
        case {"type": "Literal", "value": str(value)}:
            return value
    return None


def make_location(node: Node, path: Path) -> Location:
    """Create Location from ESTree node ``loc``.

    Args:
        node: ESTree node with position info
        path: Source file path

    Returns:
        Location pointing to node

    Raises:
        ASTError: If node has no loc (FAIL-FIRST)
    """
    from envcheck.domain.exceptions.parsing import ASTError
    from envcheck.domain.model.location import Location

    match node.get("loc"):
        case {"start": {"line": int(line), "column": int(column)}, **rest}:
            pass
        case _:
            raise ASTError(
                path,
                Location(file=path, line=1, column=0),
                f"{node.get('type', '<node>')} node has no loc info",
            )

    end_line: int | None = None
    end_column: int | None = None
    match rest.get("end"):
        case {"line": int(end_line_value), "column": int(end_column_value)}:
            end_line = end_line_value
            end_column = end_column_value

    return Location(
        file=path,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
    )
