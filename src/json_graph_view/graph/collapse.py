"""Collapse handling: which nodes disappear when paths are collapsed."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from json_graph_view.graph.nodes import GraphEdge, GraphNode

__all__ = ["apply_collapse", "hidden_paths"]


def hidden_paths(edges: Iterable[GraphEdge], collapsed: Iterable[str]) -> set[str]:
    """Return every node id reachable through outgoing edges from a collapsed path.

    The collapsed paths themselves are not included unless another collapsed
    path hides them. Paths that have no node are ignored.
    """
    children: dict[str, list[str]] = defaultdict(list)
    for edge in edges:
        children[edge.source].append(edge.target)

    hidden: set[str] = set()
    stack = [target for path in collapsed for target in children.get(path, ())]
    while stack:
        node_id = stack.pop()
        if node_id in hidden:
            continue
        hidden.add(node_id)
        stack.extend(children.get(node_id, ()))
    return hidden


def apply_collapse(
    nodes: list[GraphNode],
    edges: list[GraphEdge],
    collapsed: Iterable[str],
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Drop hidden nodes and every edge that targets one.

    Returns:
        ``(visible_nodes, visible_edges)`` in their original order.
    """
    hidden = hidden_paths(edges, collapsed)
    visible_nodes = [n for n in nodes if n.id not in hidden]
    visible_edges = [e for e in edges if e.target not in hidden]
    return visible_nodes, visible_edges
