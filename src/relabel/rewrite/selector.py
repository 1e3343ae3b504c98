"""Tagged union describing the shape of a job's ``runs-on`` value."""

from __future__ import annotations

from dataclasses import dataclass

from relabel.parser.nodes import Node, NodeKind


@dataclass(frozen=True)
class ScalarSelector:
    """``runs-on: ubuntu-latest``"""

    node: Node


@dataclass(frozen=True)
class SequenceSelector:
    """``runs-on: [self-hosted, linux]`` or the equivalent block list."""

    items: tuple[Node, ...]


@dataclass(frozen=True)
class UnsupportedSelector:
    """Any other shape, e.g. ``runs-on: {group: ..., labels: ...}`` or ``runs-on: *anchor``."""

    kind: NodeKind


RunnerSelector = ScalarSelector | SequenceSelector | UnsupportedSelector


def classify(node: Node) -> RunnerSelector:
    """Decide the selector shape once for a ``runs-on`` value node."""
    if node.kind is NodeKind.SCALAR:
        return ScalarSelector(node)
    if node.kind is NodeKind.SEQUENCE:
        return SequenceSelector(node.children)
    return UnsupportedSelector(node.kind)
