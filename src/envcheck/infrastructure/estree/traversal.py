"""Depth-first, document-order traversal of ESTree trees.

Stack-based, so deep JSX trees do not hit the recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum, auto
from typing import TYPE_CHECKING

from envcheck.infrastructure.estree.nodes import is_node, node_type
from envcheck.infrastructure.estree.visitor_keys import NON_CHILD_KEYS, VISITOR_KEYS

if TYPE_CHECKING:
    from envcheck.domain.ports.rule import Node


class Phase(Enum):
    """Traversal event kind."""

    ENTER = auto()
    EXIT = auto()


def child_keys(node: Node) -> tuple[str, ...]:
    """Keys of node that may hold children, in source order."""
    keys = VISITOR_KEYS.get(node_type(node))
    if keys is not None:
        return keys
    return tuple(key for key in node if key not in NON_CHILD_KEYS)


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield direct children of node in source order.

    Non-node values (strings, numbers, ``loc`` objects, nulls) are skipped;
    lists are flattened, with null holes (``[, a]``) skipped.
    """
    for key in child_keys(node):
        value = node.get(key)
        if is_node(value):
            yield value
        elif isinstance(value, Sequence) and not isinstance(value, str):
            for item in value:
                if is_node(item):
                    yield item


def walk(root: Node) -> Iterator[tuple[Phase, Node]]:
    """Walk tree depth-first, yielding ENTER and EXIT events.

    Every node is entered before its children and exited after all of
    them, so ``(EXIT, root)`` is always the last event.

    Args:
        root: Tree root (normally a Program node)

    Yields:
        (phase, node) pairs in document order

    Example:
        for phase, node in walk(program):
            match phase, node:
                case Phase.ENTER, {"type": "DebuggerStatement"}:
                    print("Found debugger!")
    """
    node_type(root)  # FAIL-FIRST: root must be a node

    stack: list[tuple[Phase, Node]] = [(Phase.ENTER, root)]

    while stack:
        phase, node = stack.pop()
        yield phase, node

        if phase is Phase.ENTER:
            stack.append((Phase.EXIT, node))
            # Reverse so the first child is popped first
            stack.extend((Phase.ENTER, child) for child in reversed(list(iter_child_nodes(node))))
