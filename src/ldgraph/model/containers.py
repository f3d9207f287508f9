from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ldgraph.errors import ContainerShapeError

GRAPH_FIELD = "@graph"
WRAPPED_FIELD = "_graph"
ID_FIELD = "@id"
TYPE_FIELD = "@type"

Node = dict[str, Any]


class ContainerKind(Enum):
    """The three shapes a graph can arrive in."""

    GRAPH = "graph"  # {"@graph": [...]}, a server response, or a bare node list
    WRAPPED = "wrapped"  # {"_graph": [...]} or {"_graph": {...}}, bound view state
    NODE = "node"  # the node itself


@dataclass(frozen=True, slots=True)
class GraphContainer:
    """A graph container normalized once at the boundary.

    `raw` is the caller's value; `nodes` is the live node list inside it, so
    every mutation made through the container is visible to the caller.
    """

    kind: ContainerKind
    raw: Any
    nodes: list[Node]

    @classmethod
    def of(cls, value: Any) -> GraphContainer:
        if isinstance(value, GraphContainer):
            return value
        if isinstance(value, list):
            return cls(ContainerKind.GRAPH, value, value)
        if isinstance(value, dict):
            graph = value.get(GRAPH_FIELD)
            if isinstance(graph, list):
                return cls(ContainerKind.GRAPH, value, graph)
            wrapped = value.get(WRAPPED_FIELD)
            if isinstance(wrapped, list):
                return cls(ContainerKind.WRAPPED, value, wrapped)
            if isinstance(wrapped, dict):
                return cls(ContainerKind.WRAPPED, value, [wrapped])
        return cls(ContainerKind.NODE, value, [value])

    @property
    def has_sequence(self) -> bool:
        """True when `nodes` is a list owned by the caller's value."""
        if self.kind is ContainerKind.NODE:
            return False
        return isinstance(self.raw, list) or not isinstance(self.raw.get(WRAPPED_FIELD), dict)

    def require_sequence(self) -> list[Node]:
        if not self.has_sequence:
            raise ContainerShapeError(f"{self.kind.value} container has no node sequence to modify")
        return self.nodes

    def ids(self) -> list[str | None]:
        return [node.get(ID_FIELD) if isinstance(node, dict) else None for node in self.nodes]

    def to_document(self) -> dict[str, Any]:
        """Serializable `{"@graph": [...]}` form of the container."""
        return {GRAPH_FIELD: self.nodes}


def is_container(value: Any) -> bool:
    """True for values carrying a node sequence under a recognized field."""
    if isinstance(value, GraphContainer):
        return value.kind is not ContainerKind.NODE
    return isinstance(value, dict) and (
        isinstance(value.get(GRAPH_FIELD), list) or isinstance(value.get(WRAPPED_FIELD), list)
    )


def is_reference(value: Any) -> bool:
    return isinstance(value, dict) and isinstance(value.get(ID_FIELD), str)
