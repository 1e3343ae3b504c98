"""Immutable, position-annotated YAML document tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class NodeKind(StrEnum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    ALIAS = "alias"


@dataclass(frozen=True)
class Node:
    """A single YAML node with its 1-based source position.

    Mapping children are stored flattened as alternating key/value nodes;
    sequence children are the elements in order. ``value`` holds the literal
    text of scalars and is ``None`` for collections and aliases. Alias nodes
    are not expanded; their position is that of the anchor they refer to.
    """

    kind: NodeKind
    line: int
    column: int
    value: str | None = None
    children: tuple[Node, ...] = field(default_factory=tuple)

    @property
    def is_scalar(self) -> bool:
        return self.kind is NodeKind.SCALAR

    def pairs(self) -> Iterator[tuple[Node, Node]]:
        """Yield ``(key, value)`` pairs of a mapping node, in source order."""
        if self.kind is not NodeKind.MAPPING:
            return
        yield from zip(self.children[0::2], self.children[1::2])

    def get(self, key: str) -> Node | None:
        """Return the value of the first scalar key equal to ``key``."""
        for key_node, value_node in self.pairs():
            if key_node.is_scalar and key_node.value == key:
                return value_node
        return None
