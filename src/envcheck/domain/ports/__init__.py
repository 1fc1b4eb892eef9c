"""Domain ports: extension contracts for rules and reporters."""

from envcheck.domain.ports.reporter import ReporterProtocol
from envcheck.domain.ports.rule import Handler, Node, RuleContextProtocol, RuleProtocol

__all__ = [
    "Handler",
    "Node",
    "ReporterProtocol",
    "RuleContextProtocol",
    "RuleProtocol",
]
