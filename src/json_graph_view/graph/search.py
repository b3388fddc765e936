"""Search and focus helpers over a built graph.

These work on the visible graph only: a node hidden by a collapse cannot be
matched or focused, its nearest visible ancestor is used instead.
"""

from __future__ import annotations

from json_graph_view.graph.nodes import Graph
from json_graph_view.paths import ancestor_paths

__all__ = ["focus_node", "lineage", "search_nodes"]


def _parents(graph: Graph) -> dict[str, str]:
    return {edge.target: edge.source for edge in graph.edges}


def lineage(graph: Graph, node_id: str) -> list[str]:
    """Return the node ids from the root down to ``node_id`` along graph edges."""
    parents = _parents(graph)
    chain = [node_id]
    seen = {node_id}
    while chain[-1] in parents:
        parent = parents[chain[-1]]
        if parent in seen:
            break
        chain.append(parent)
        seen.add(parent)
    chain.reverse()
    return chain


def search_nodes(graph: Graph, query: str) -> set[str]:
    """Return ids of nodes matching ``query`` plus every ancestor of a match.

    A node matches when its label, its path, or any ``key:summary`` entry
    contains ``query`` case-insensitively. An empty query matches nothing.
    """
    if not query:
        return set()

    needle = query.lower()
    parents = _parents(graph)
    result: set[str] = set()

    for node in graph.nodes:
        haystacks = [node.label, node.id]
        haystacks.extend(f"{e.key}:{e.summary}" for e in node.entries)
        if not any(needle in h.lower() for h in haystacks):
            continue
        current: str | None = node.id
        while current is not None and current not in result:
            result.add(current)
            current = parents.get(current)

    return result


def focus_node(graph: Graph, path: str | None) -> str | None:
    """Return the id of the node that represents ``path`` in the graph.

    Scalars and hidden values have no node of their own; the nearest
    ancestor that is a visible node is returned instead. None when nothing
    on the path is visible.
    """
    if path is None:
        return None
    visible = graph.node_ids
    for candidate in reversed(ancestor_paths(path)):
        if candidate in visible:
            return candidate
    return None
