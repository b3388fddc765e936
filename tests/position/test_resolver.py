"""Tests for find_path_at and range_for_path."""

from __future__ import annotations

import pytest

from json_graph_view.position import (
    PathPosition,
    Position,
    Range,
    build_position_map,
    find_path_at,
    range_for_path,
)


def span(line: int, start: int, end: int) -> Range:
    return Range(Position(line, start), Position(line, end))


@pytest.fixture
def nested() -> dict[str, PathPosition]:
    return build_position_map('{"a":{"b":1}}')


# ---------------------------------------------------------------------------
# Range primitives
# ---------------------------------------------------------------------------


class TestRange:
    def test_contains_is_inclusive_on_both_ends(self) -> None:
        r = span(1, 3, 6)
        assert r.contains(1, 3)
        assert r.contains(1, 6)
        assert not r.contains(1, 2)
        assert not r.contains(1, 7)

    def test_contains_across_lines(self) -> None:
        r = Range(Position(1, 5), Position(3, 2))
        assert r.contains(2, 1)
        assert r.contains(2, 500)
        assert not r.contains(1, 4)
        assert not r.contains(3, 3)
        assert not r.contains(4, 1)

    def test_single_line_size(self) -> None:
        assert span(1, 3, 10).size == 7

    def test_multi_line_size_weights_lines(self) -> None:
        assert Range(Position(1, 1), Position(3, 2)).size == 2002

    def test_positions_order(self) -> None:
        assert Position(1, 9) < Position(2, 1)
        assert Position(2, 1) < Position(2, 2)


# ---------------------------------------------------------------------------
# find_path_at
# ---------------------------------------------------------------------------


class TestFindPathAt:
    def test_inside_literal(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 1, 11) == "$.a.b"

    def test_on_key_of_innermost_property(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 1, 8) == "$.a.b"

    def test_on_outer_key(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 1, 3) == "$.a"

    def test_opening_brace_is_root(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 1, 1) == "$"

    def test_position_after_value_still_matches(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 1, 12) == "$.a.b"

    def test_outside_document(self, nested: dict[str, PathPosition]) -> None:
        assert find_path_at(nested, 5, 1) is None

    def test_empty_map(self) -> None:
        assert find_path_at({}, 1, 1) is None

    def test_multi_line_prefers_single_line_match(self) -> None:
        positions = build_position_map('{\n  "a": [1, 2]\n}')
        assert find_path_at(positions, 2, 9) == "$.a[0]"
        assert find_path_at(positions, 2, 13) == "$.a[1]"
        assert find_path_at(positions, 2, 1) == "$"

    def test_tie_keeps_earlier_entry(self) -> None:
        positions = {
            "$": PathPosition("$", span(1, 1, 4)),
            "$[0]": PathPosition("$[0]", span(1, 1, 4)),
        }
        assert find_path_at(positions, 1, 2) == "$"

    def test_cursor_after_edit_example(self) -> None:
        positions = build_position_map('{"enabled": true}')
        assert find_path_at(positions, 1, 14) == "$.enabled"


# ---------------------------------------------------------------------------
# range_for_path
# ---------------------------------------------------------------------------


class TestRangeForPath:
    def test_known_path(self, nested: dict[str, PathPosition]) -> None:
        assert range_for_path(nested, "$.a.b") == span(1, 11, 12)

    def test_root(self, nested: dict[str, PathPosition]) -> None:
        assert range_for_path(nested, "$") == span(1, 1, 14)

    def test_unknown_path(self, nested: dict[str, PathPosition]) -> None:
        assert range_for_path(nested, "$.zzz") is None
