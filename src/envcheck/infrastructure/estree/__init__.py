"""ESTree helpers: node access, locations, traversal."""

from envcheck.infrastructure.estree.nodes import (
    identifier_name,
    is_node,
    make_location,
    node_type,
    string_literal_value,
)
from envcheck.infrastructure.estree.traversal import Phase, iter_child_nodes, walk

__all__ = [
    "Phase",
    "identifier_name",
    "is_node",
    "iter_child_nodes",
    "make_location",
    "node_type",
    "string_literal_value",
    "walk",
]
