"""YAML parsing with line fidelity for runner label rewriting."""

from relabel.parser.loader import TrackedLoader, WorkflowParseError, YAMLSafetyError
from relabel.parser.nodes import Node, NodeKind

__all__ = [
    "Node",
    "NodeKind",
    "TrackedLoader",
    "WorkflowParseError",
    "YAMLSafetyError",
]
