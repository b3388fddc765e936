"""GraphNode, GraphEntry, GraphEdge and Graph: the derived node/edge view of a document.

Node ids are canonical paths, so the same value keeps the same id across
rebuilds as long as its path does not change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_graph_view.values import JsonKind

__all__ = ["Graph", "GraphEdge", "GraphEntry", "GraphNode", "NodePosition"]


@dataclass(frozen=True, slots=True)
class NodePosition:
    """Top-left corner of a node on the canvas."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class GraphEntry:
    """One key/index row of a composite node.

    Attributes:
        key:       Object key, or the array index as text.
        summary:   Display text; ``"{n keys}"`` / ``"[n items]"`` for composite
                   children, the literal for scalars.
        raw_value: The child value itself.
        kind:      JsonKind of the child.
        is_ref:    True when the child is composite and has its own node.
        path:      Canonical path of the child.
    """

    key: str
    summary: str
    raw_value: Any
    kind: JsonKind
    is_ref: bool
    path: str


@dataclass(slots=True)
class GraphNode:
    """A composite (object or array) value of the document.

    Attributes:
        id:          Canonical path of the value.
        kind:        ``JsonKind.OBJECT`` or ``JsonKind.ARRAY``.
        label:       ``"root"`` for the document root, else the last path token.
        entries:     One GraphEntry per key/index, in document order.
        depth:       Number of tokens in the path (root is 0).
        collapsed:   True when the node's descendants are hidden.
        child_count: Number of composite values below this node, transitively.
        position:    Canvas position, set by the layout.
    """

    id: str
    kind: JsonKind
    label: str
    entries: list[GraphEntry] = field(default_factory=list)
    depth: int = 0
    collapsed: bool = False
    child_count: int = 0
    position: NodePosition = field(default_factory=lambda: NodePosition(0.0, 0.0))


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Link from a composite node to one of its composite children."""

    id: str
    source: str
    target: str
    key: str


@dataclass(frozen=True, slots=True)
class Graph:
    """Visible nodes and edges of one build."""

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def node(self, node_id: str) -> GraphNode | None:
        """Return the node with ``node_id``, or None."""
        return next((n for n in self.nodes if n.id == node_id), None)

    @property
    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}
