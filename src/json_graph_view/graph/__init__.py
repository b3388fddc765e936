"""Graph subpackage: JSON value -> layered node/edge graph.

Re-exports the public API for the graph module:
- GraphNode, GraphEntry, GraphEdge, Graph, NodePosition: graph data types
- GraphBuilder: derive a collapsible, laid-out graph from a value
- hidden_paths: nodes hidden by a collapse set
- layout_nodes, merge_positions: layered layout and position continuity
- search_nodes, lineage, focus_node: search and focus helpers
"""

from json_graph_view.graph.builder import GraphBuilder
from json_graph_view.graph.collapse import apply_collapse, hidden_paths
from json_graph_view.graph.layout import layout_nodes, merge_positions
from json_graph_view.graph.nodes import (
    Graph,
    GraphEdge,
    GraphEntry,
    GraphNode,
    NodePosition,
)
from json_graph_view.graph.search import focus_node, lineage, search_nodes

__all__ = [
    "Graph",
    "GraphBuilder",
    "GraphEdge",
    "GraphEntry",
    "GraphNode",
    "NodePosition",
    "apply_collapse",
    "focus_node",
    "hidden_paths",
    "layout_nodes",
    "lineage",
    "merge_positions",
    "search_nodes",
]
