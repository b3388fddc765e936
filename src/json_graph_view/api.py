"""Public API functions for json-graph-view.

Thin stateless wrappers for callers that do not need an EditorSession: each
call creates whatever helper object it needs, so calls never share state.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_graph_view.config import LayoutConfig
from json_graph_view.graph.builder import GraphBuilder
from json_graph_view.graph.nodes import Graph, GraphNode
from json_graph_view.position.indexer import build_position_map
from json_graph_view.position.resolver import find_path_at, range_for_path
from json_graph_view.position.types import Range

__all__ = ["path_at", "range_of", "to_graph"]


def path_at(text: str, line: int, column: int) -> str | None:
    """Return the path under a 1-based (line, column) of ``text``, or None."""
    return find_path_at(build_position_map(text), line, column)


def range_of(text: str, path: str) -> Range | None:
    """Return the value range of ``path`` in ``text``, or None."""
    return range_for_path(build_position_map(text), path)


def to_graph(
    value: Any,
    collapsed: Iterable[str] = frozenset(),
    previous_nodes: Iterable[GraphNode] = (),
    config: LayoutConfig | None = None,
) -> Graph:
    """Build the visible graph of a JSON value.

    Args:
        value:          Root JSON value.
        collapsed:      Paths whose descendants are hidden.
        previous_nodes: Nodes of an earlier build whose positions are kept.
        config:         Layout geometry. Defaults to ``LayoutConfig()``.
    """
    builder = GraphBuilder(config=config if config is not None else LayoutConfig())
    return builder.build(value, previous_nodes=previous_nodes, collapsed=collapsed)
