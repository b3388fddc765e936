"""Layered layout of graph nodes, plus continuity with a previous layout.

Nodes are grouped into layers by depth. Each layer sits at
``x = depth * horizontal_spacing`` and its nodes are stacked top to bottom in
list order, separated by ``node_gap`` and centred on ``y = 0``. A node's
height is ``base_height + row_height * len(entries)``.

The layout is recomputed from scratch on every build; ``merge_positions``
then puts back the positions of nodes the user already saw (and possibly
dragged).
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

import numpy as np

from json_graph_view.config import LayoutConfig
from json_graph_view.graph.nodes import GraphNode, NodePosition

__all__ = ["layout_nodes", "merge_positions"]


def layout_nodes(nodes: Iterable[GraphNode], config: LayoutConfig | None = None) -> None:
    """Assign a fresh layered position to every node (in place)."""
    config = config if config is not None else LayoutConfig()

    layers: dict[int, list[GraphNode]] = defaultdict(list)
    for node in nodes:
        layers[node.depth].append(node)

    for depth, layer in layers.items():
        x = depth * config.horizontal_spacing
        entry_counts = np.array([len(n.entries) for n in layer], dtype=np.float64)
        heights = config.base_height + config.row_height * entry_counts
        total = heights.sum() + (len(layer) - 1) * config.node_gap
        # top of node i = top of layer + sum of (height + gap) of nodes before it
        offsets = np.concatenate(([0.0], np.cumsum(heights + config.node_gap)[:-1]))
        tops = offsets - total / 2.0

        for node, y in zip(layer, tops.tolist(), strict=True):
            node.position = NodePosition(x=float(x), y=float(y))


def merge_positions(
    nodes: Iterable[GraphNode],
    previous: Mapping[str, NodePosition],
) -> None:
    """Overwrite fresh positions with previous ones for nodes that already existed.

    Nodes are matched by id (canonical path); a node whose path changed
    counts as new and keeps its fresh position.
    """
    for node in nodes:
        existing = previous.get(node.id)
        if existing is not None:
            node.position = existing
