"""GraphBuilder: derives a layered, collapsible node/edge graph from a JSON value.

Only composite values (objects and arrays) become nodes. Scalars are shown
as entries of their parent node. For each composite child the builder
recurses first and then appends the parent-to-child edge, keyed by the
entry key, so a node's ``child_count`` (composite descendants, transitively)
is known when the node is created.

A build runs in four steps:

1. walk the value depth-first, producing every node and edge
2. hide the descendants of collapsed paths (``collapse.apply_collapse``)
3. lay out the surviving nodes by depth (``layout.layout_nodes``)
4. restore the positions of nodes that existed in the previous build
   (``layout.merge_positions``)

Node ids are canonical paths; collapse state and previous positions are
matched by path only.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from json_graph_view.config import LayoutConfig
from json_graph_view.graph.collapse import apply_collapse
from json_graph_view.graph.layout import layout_nodes, merge_positions
from json_graph_view.graph.nodes import Graph, GraphEdge, GraphEntry, GraphNode
from json_graph_view.paths import ROOT, PathToken, child_path
from json_graph_view.values import JsonKind, classify, summarize

__all__ = ["GraphBuilder"]

_COMPOSITE = (JsonKind.OBJECT, JsonKind.ARRAY)


@dataclass
class GraphBuilder:
    """Converts a JSON value into a laid-out Graph.

    Given the same value and collapse set and no previous nodes, two builds
    produce identical nodes, edges and positions.

    Example::

        builder = GraphBuilder()
        graph = builder.build({"meta": {"tags": ["a", "b"]}})
        [n.id for n in graph.nodes]   # ['$.meta.tags', '$.meta', '$']
    """

    config: LayoutConfig = field(default_factory=LayoutConfig)

    def build(
        self,
        value: Any,
        previous_nodes: Iterable[GraphNode] = (),
        collapsed: Iterable[str] = frozenset(),
    ) -> Graph:
        """Build the visible graph of ``value``.

        Args:
            value:          Root JSON value. A scalar root yields an empty graph.
            previous_nodes: Nodes of the previous build; their positions are
                            kept for nodes whose id still exists.
            collapsed:      Paths whose descendant nodes are hidden.

        Returns:
            A Graph with nodes in depth-first completion order (children
            before their parent) and edges in creation order.
        """
        collapsed = frozenset(collapsed)
        previous = {node.id: node.position for node in previous_nodes}

        nodes: list[GraphNode] = []
        edges: list[GraphEdge] = []
        self._walk(value, ROOT, None, 0, collapsed, nodes, edges)

        visible_nodes, visible_edges = apply_collapse(nodes, edges, collapsed)
        layout_nodes(visible_nodes, self.config)
        merge_positions(visible_nodes, previous)
        return Graph(nodes=visible_nodes, edges=visible_edges)

    def _walk(
        self,
        value: Any,
        path: str,
        token: PathToken | None,
        depth: int,
        collapsed: frozenset[str],
        nodes: list[GraphNode],
        edges: list[GraphEdge],
    ) -> int:
        """Create the node for ``value`` and its subtree.

        Returns:
            The transitive composite-descendant count of ``value``; 0 for
            scalars, which get no node.
        """
        kind = classify(value)
        if kind not in _COMPOSITE:
            return 0

        items: Iterable[tuple[PathToken, Any]] = (
            value.items() if kind is JsonKind.OBJECT else enumerate(value)
        )
        entries: list[GraphEntry] = []
        total = 0

        for child_token, child in items:
            child_kind = classify(child)
            is_ref = child_kind in _COMPOSITE
            entry_path = child_path(path, child_token)
            key = str(child_token)
            entries.append(
                GraphEntry(
                    key=key,
                    summary=summarize(child),
                    raw_value=child,
                    kind=child_kind,
                    is_ref=is_ref,
                    path=entry_path,
                )
            )

            if is_ref:
                descendants = self._walk(
                    child, entry_path, child_token, depth + 1, collapsed, nodes, edges
                )
                total += descendants + 1
                edges.append(
                    GraphEdge(
                        id=f"{path}::{key}->{entry_path}",
                        source=path,
                        target=entry_path,
                        key=key,
                    )
                )

        nodes.append(
            GraphNode(
                id=path,
                kind=kind,
                label="root" if token is None else str(token),
                entries=entries,
                depth=depth,
                collapsed=path in collapsed,
                child_count=total,
            )
        )
        return total
