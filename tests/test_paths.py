"""Tests for canonical path encoding and decoding.

Covers the segment forms (.name, [n], ["quoted"]), escaping, lenient
decoding of malformed input, the root-marker failure, roundtrips, and the
parent/child/ancestor helpers.
"""

from __future__ import annotations

import pytest

from json_graph_view.errors import PathSyntaxError
from json_graph_view.paths import (
    ancestor_paths,
    child_path,
    decode_path,
    encode_path,
    is_safe_identifier,
    parent_path,
)

# ---------------------------------------------------------------------------
# is_safe_identifier
# ---------------------------------------------------------------------------


class TestIsSafeIdentifier:
    @pytest.mark.parametrize("key", ["a", "_x", "$ref", "camelCase", "a1", "A_b$2"])
    def test_identifiers(self, key: str) -> None:
        assert is_safe_identifier(key)

    @pytest.mark.parametrize("key", ["", "1a", "a b", "a-b", "a.b", "é", 'q"'])
    def test_non_identifiers(self, key: str) -> None:
        assert not is_safe_identifier(key)


# ---------------------------------------------------------------------------
# encode_path
# ---------------------------------------------------------------------------


class TestEncodePath:
    def test_root(self) -> None:
        assert encode_path([]) == "$"

    def test_identifier_keys_use_dots(self) -> None:
        assert encode_path(["meta", "tags"]) == "$.meta.tags"

    def test_index_uses_brackets(self) -> None:
        assert encode_path(["meta", "tags", 1]) == "$.meta.tags[1]"

    def test_non_identifier_key_is_quoted(self) -> None:
        assert encode_path(["a b"]) == '$["a b"]'

    def test_key_starting_with_digit_is_quoted(self) -> None:
        assert encode_path(["0"]) == '$["0"]'

    def test_empty_key_is_quoted(self) -> None:
        assert encode_path([""]) == '$[""]'

    def test_quote_and_backslash_are_escaped(self) -> None:
        assert encode_path(['say "hi"']) == '$["say \\"hi\\""]'
        assert encode_path(["a\\b"]) == '$["a\\\\b"]'

    def test_bool_token_rejected(self) -> None:
        with pytest.raises(TypeError):
            encode_path([True])

    def test_float_token_rejected(self) -> None:
        with pytest.raises(TypeError):
            encode_path([1.5])  # type: ignore[list-item]


# ---------------------------------------------------------------------------
# decode_path
# ---------------------------------------------------------------------------


class TestDecodePath:
    def test_root(self) -> None:
        assert decode_path("$") == []

    def test_dotted(self) -> None:
        assert decode_path("$.meta.tags[1]") == ["meta", "tags", 1]

    def test_quoted_segment(self) -> None:
        assert decode_path('$["a b"].c') == ["a b", "c"]

    def test_quoted_segment_unescapes(self) -> None:
        assert decode_path('$["say \\"hi\\""]') == ['say "hi"']
        assert decode_path('$["a\\\\b"]') == ["a\\b"]

    def test_missing_root_marker_raises(self) -> None:
        with pytest.raises(PathSyntaxError, match="must start with"):
            decode_path("meta.tags")

    def test_path_syntax_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_path("")

    def test_non_numeric_bracket_dropped(self) -> None:
        assert decode_path("$.a[x].b") == ["a", "b"]

    def test_unterminated_bracket_dropped(self) -> None:
        assert decode_path("$.a[") == ["a"]

    def test_unterminated_numeric_bracket_keeps_number(self) -> None:
        assert decode_path("$.a[12") == ["a", 12]

    def test_leading_integer_of_bracket_used(self) -> None:
        assert decode_path("$[3abc]") == [3]

    def test_unterminated_quoted_segment_keeps_text(self) -> None:
        assert decode_path('$["abc') == ["abc"]

    def test_empty_dot_segment_dropped(self) -> None:
        assert decode_path("$..a") == ["a"]

    def test_stray_characters_skipped(self) -> None:
        assert decode_path("$ .a") == ["a"]

    def test_never_raises_on_garbage_after_root(self) -> None:
        assert isinstance(decode_path('$[[[]]."\\'), list)


# ---------------------------------------------------------------------------
# Roundtrip
# ---------------------------------------------------------------------------


class TestRoundtrip:
    @pytest.mark.parametrize(
        "tokens",
        [
            [],
            ["a"],
            [0],
            ["meta", "tags", 1],
            ["a b", 'q"uote', "back\\slash", ""],
            ["中文", "é", "with.dot", "with[bracket]", "$"],
            [10, "x", 0, 999],
            ['"', "\\", '\\"', "]", "["],
        ],
    )
    def test_decode_inverts_encode(self, tokens: list[str | int]) -> None:
        assert decode_path(encode_path(tokens)) == tokens


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestPathHelpers:
    def test_child_path_identifier(self) -> None:
        assert child_path("$.meta", "tags") == "$.meta.tags"

    def test_child_path_index(self) -> None:
        assert child_path("$.meta.tags", 1) == "$.meta.tags[1]"

    def test_child_path_quoted(self) -> None:
        assert child_path("$", "a b") == '$["a b"]'

    def test_child_path_matches_encode(self) -> None:
        assert child_path(encode_path(["x", 2]), "y z") == encode_path(["x", 2, "y z"])

    def test_parent_of_root_is_none(self) -> None:
        assert parent_path("$") is None

    def test_parent_path(self) -> None:
        assert parent_path("$.meta.tags[1]") == "$.meta.tags"
        assert parent_path('$["a.b"].c') == '$["a.b"]'
        assert parent_path("$.a") == "$"

    def test_ancestor_paths(self) -> None:
        assert ancestor_paths("$.meta.tags[1]") == [
            "$",
            "$.meta",
            "$.meta.tags",
            "$.meta.tags[1]",
        ]

    def test_ancestor_paths_of_root(self) -> None:
        assert ancestor_paths("$") == ["$"]
