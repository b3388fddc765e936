"""Tests for GraphBuilder.

Covers:
- one node per composite value, scalars as entries only
- node ids, labels, depth and child_count
- edge ids and direction
- collapse hiding descendants and expand restoring them
- deterministic layout and position continuity across rebuilds
"""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from json_graph_view.config import LayoutConfig
from json_graph_view.graph import GraphBuilder, NodePosition
from json_graph_view.values import JsonKind


@pytest.fixture
def value() -> dict[str, Any]:
    return {
        "name": "x",
        "meta": {"tags": ["a", "b"], "owner": {"id": 1}},
        "items": [],
    }


@pytest.fixture
def builder() -> GraphBuilder:
    return GraphBuilder()


# ---------------------------------------------------------------------------
# Nodes and entries
# ---------------------------------------------------------------------------


class TestNodes:
    def test_children_before_parent(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value)
        assert [n.id for n in graph.nodes] == [
            "$.meta.tags",
            "$.meta.owner",
            "$.meta",
            "$.items",
            "$",
        ]

    def test_root_node(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        root = builder.build(value).node("$")
        assert root is not None
        assert root.label == "root"
        assert root.kind is JsonKind.OBJECT
        assert root.depth == 0
        assert root.child_count == 4
        assert not root.collapsed

    def test_labels_and_depth(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value)
        tags = graph.node("$.meta.tags")
        assert tags is not None
        assert tags.label == "tags"
        assert tags.kind is JsonKind.ARRAY
        assert tags.depth == 2
        assert tags.child_count == 0

    def test_child_count_is_transitive(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value)
        assert graph.node("$.meta").child_count == 2  # type: ignore[union-attr]
        assert graph.node("$.items").child_count == 0  # type: ignore[union-attr]

    def test_root_entries(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        root = builder.build(value).node("$")
        assert root is not None
        assert [(e.key, e.summary, e.is_ref) for e in root.entries] == [
            ("name", '"x"', False),
            ("meta", "{2 keys}", True),
            ("items", "Empty", True),
        ]
        assert [e.path for e in root.entries] == ["$.name", "$.meta", "$.items"]

    def test_entry_keeps_raw_value(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        tags = builder.build(value).node("$.meta.tags")
        assert tags is not None
        assert [e.key for e in tags.entries] == ["0", "1"]
        assert [e.raw_value for e in tags.entries] == ["a", "b"]
        assert tags.entries[1].path == "$.meta.tags[1]"
        assert tags.entries[1].kind is JsonKind.STRING

    def test_array_element_label_is_index(self, builder: GraphBuilder) -> None:
        graph = builder.build([{"a": 1}])
        assert graph.node("$[0]").label == "0"  # type: ignore[union-attr]

    def test_non_identifier_key_path(self, builder: GraphBuilder) -> None:
        graph = builder.build({"a b": {}})
        assert graph.node_ids == {"$", '$["a b"]'}

    @pytest.mark.parametrize("scalar", [None, True, 3, "text"])
    def test_scalar_root_has_no_nodes(self, builder: GraphBuilder, scalar: Any) -> None:
        graph = builder.build(scalar)
        assert graph.nodes == []
        assert graph.edges == []

    def test_empty_containers(self, builder: GraphBuilder) -> None:
        graph = builder.build({"o": {}, "a": []})
        assert graph.node_ids == {"$", "$.o", "$.a"}
        assert graph.node("$.o").entries == []  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------


class TestEdges:
    def test_edges_in_creation_order(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value)
        assert [e.id for e in graph.edges] == [
            "$.meta::tags->$.meta.tags",
            "$.meta::owner->$.meta.owner",
            "$::meta->$.meta",
            "$::items->$.items",
        ]

    def test_edge_endpoints(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        edge = builder.build(value).edges[0]
        assert edge.source == "$.meta"
        assert edge.target == "$.meta.tags"
        assert edge.key == "tags"

    def test_no_edges_to_scalars(self, builder: GraphBuilder) -> None:
        assert builder.build({"a": 1, "b": "x"}).edges == []

    def test_every_edge_joins_visible_nodes(
        self, builder: GraphBuilder, value: dict[str, Any]
    ) -> None:
        graph = builder.build(value, collapsed={"$.meta"})
        ids = graph.node_ids
        assert all(e.source in ids and e.target in ids for e in graph.edges)


# ---------------------------------------------------------------------------
# Collapse
# ---------------------------------------------------------------------------


class TestCollapse:
    def test_collapse_hides_descendants(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value, collapsed={"$.meta"})
        assert graph.node_ids == {"$", "$.meta", "$.items"}
        assert [e.target for e in graph.edges] == ["$.meta", "$.items"]

    def test_collapsed_node_stays_visible(
        self, builder: GraphBuilder, value: dict[str, Any]
    ) -> None:
        meta = builder.build(value, collapsed={"$.meta"}).node("$.meta")
        assert meta is not None
        assert meta.collapsed
        assert meta.child_count == 2

    def test_collapse_root(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value, collapsed={"$"})
        assert graph.node_ids == {"$"}
        assert graph.edges == []

    def test_unknown_collapsed_path_ignored(
        self, builder: GraphBuilder, value: dict[str, Any]
    ) -> None:
        assert len(builder.build(value, collapsed={"$.nope"}).nodes) == 5

    def test_expand_restores_original_graph(
        self, builder: GraphBuilder, value: dict[str, Any]
    ) -> None:
        original = builder.build(value)
        collapsed = builder.build(value, collapsed={"$.meta"})
        expanded = builder.build(value, previous_nodes=collapsed.nodes)
        assert [n.id for n in expanded.nodes] == [n.id for n in original.nodes]
        assert [e.id for e in expanded.edges] == [e.id for e in original.edges]
        assert [n.position for n in expanded.nodes] == [n.position for n in original.nodes]


# ---------------------------------------------------------------------------
# Layout and continuity
# ---------------------------------------------------------------------------


class TestLayout:
    def test_positions(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        graph = builder.build(value)
        positions = {n.id: n.position for n in graph.nodes}
        assert positions == {
            "$": NodePosition(0.0, -84.0),
            "$.meta": NodePosition(400.0, -116.0),
            "$.items": NodePosition(400.0, 56.0),
            "$.meta.tags": NodePosition(800.0, -134.0),
            "$.meta.owner": NodePosition(800.0, 38.0),
        }

    def test_deterministic(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        first = builder.build(value)
        second = builder.build(value)
        assert first == second

    def test_custom_spacing(self, value: dict[str, Any]) -> None:
        builder = GraphBuilder(LayoutConfig(horizontal_spacing=100.0))
        assert builder.build(value).node("$.meta.tags").position.x == 200.0  # type: ignore[union-attr]

    def test_previous_positions_kept(self, builder: GraphBuilder, value: dict[str, Any]) -> None:
        first = builder.build(value)
        moved = [
            dataclasses.replace(n, position=NodePosition(5.0, 6.0)) if n.id == "$.meta" else n
            for n in first.nodes
        ]
        second = builder.build(value, previous_nodes=moved)
        assert second.node("$.meta").position == NodePosition(5.0, 6.0)  # type: ignore[union-attr]
        assert second.node("$").position == NodePosition(0.0, -84.0)  # type: ignore[union-attr]

    def test_new_nodes_get_fresh_positions(
        self, builder: GraphBuilder, value: dict[str, Any]
    ) -> None:
        first = builder.build({"meta": {}})
        second = builder.build(value, previous_nodes=first.nodes)
        assert second.node("$.meta.tags").position == NodePosition(800.0, -134.0)  # type: ignore[union-attr]
