"""PositionIndexer: maps every canonical path of a document to its source range.

The document text is parsed into a concrete syntax tree with tree-sitter and
the ``tree-sitter-json`` grammar. The tree is walked once while threading the
current path:

- ``object`` / ``array`` nodes record their own range at the current path;
  object pairs continue at the same path, array children at ``path + [i]``
- a ``pair`` contributes its decoded key as the next token, visits its value
  at the extended path and stores the key's range as that path's key range
- literal nodes record their exact range

Node positions are only available for strict JSON. The text is first checked
with ``values.loads``; text it rejects (comments, raw control characters in
strings, nesting beyond the recursion limit) and any tree with a syntax error
yield an empty map, never a partial one. Every call is a full pass over a
fresh parse; nothing is reused between calls.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import tree_sitter_json
from tree_sitter import Language, Parser

from json_graph_view.paths import PathToken, encode_path
from json_graph_view.position.types import PathPosition, Position, Range
from json_graph_view.values import loads

if TYPE_CHECKING:
    from tree_sitter import Node, Point

__all__ = ["JSON_LANGUAGE", "PositionIndexer", "build_position_map"]

logger = logging.getLogger(__name__)

JSON_LANGUAGE = Language(tree_sitter_json.language())

_LITERALS = frozenset({"string", "number", "true", "false", "null"})


class _ColumnMapper:
    """Converts tree-sitter points (0-based row, byte column) to 1-based positions.

    Columns are counted in characters so that they line up with the editor
    for non-ASCII text.
    """

    def __init__(self, source: bytes, ascii_only: bool) -> None:
        self._lines = None if ascii_only else source.split(b"\n")

    def position(self, point: Point) -> Position:
        row, column = point
        if self._lines is not None and row < len(self._lines):
            prefix = self._lines[row][:column]
            column = len(prefix.decode("utf-8", errors="replace"))
        return Position(line=row + 1, column=column + 1)

    def range(self, node: Node) -> Range:
        return Range(
            start=self.position(node.start_point),
            end=self.position(node.end_point),
        )


@dataclass
class PositionIndexer:
    """Builds a path to source-range index for JSON document text.

    Example::

        indexer = PositionIndexer()
        positions = indexer.build('{"a": {"b": 1}}')
        positions["$.a.b"].value_range
        # Range(start=Position(line=1, column=13), end=Position(line=1, column=14))
    """

    _parser: Parser = field(
        init=False, repr=False, default_factory=lambda: Parser(JSON_LANGUAGE)
    )

    def build(self, text: str) -> dict[str, PathPosition]:
        """Parse ``text`` and return its position map.

        Args:
            text: Raw document text.

        Returns:
            Mapping from canonical path to PathPosition in document order
            (parents before children). Empty when the text is not exactly
            one strict JSON value.
        """
        try:
            loads(text)
        except (ValueError, RecursionError) as exc:
            logger.debug("No position map: %s", exc)
            return {}

        source = text.encode("utf-8")
        tree = self._parser.parse(source)
        root = tree.root_node

        values = root.named_children
        if root.has_error or len(values) != 1:
            logger.debug(
                "No position map: has_error=%s, top-level values=%d",
                root.has_error,
                len(values),
            )
            return {}

        mapper = _ColumnMapper(source, ascii_only=text.isascii())
        positions: dict[str, PathPosition] = {}
        try:
            self._visit(values[0], [], None, mapper, positions)
        except RecursionError:
            logger.debug("No position map: document nested too deeply")
            return {}
        return positions

    def _visit(
        self,
        node: Node,
        tokens: list[PathToken],
        key_range: Range | None,
        mapper: _ColumnMapper,
        positions: dict[str, PathPosition],
    ) -> None:
        """Record ``node`` at ``tokens`` and descend into its children."""
        kind = node.type
        if kind not in _LITERALS and kind not in ("object", "array"):
            return

        path = encode_path(tokens)
        positions[path] = PathPosition(
            path=path,
            value_range=mapper.range(node),
            key_range=key_range,
        )

        if kind == "object":
            for pair in node.named_children:
                if pair.type == "pair":
                    self._visit_pair(pair, tokens, mapper, positions)
        elif kind == "array":
            for index, element in enumerate(node.named_children):
                self._visit(element, [*tokens, index], None, mapper, positions)

    def _visit_pair(
        self,
        pair: Node,
        tokens: list[PathToken],
        mapper: _ColumnMapper,
        positions: dict[str, PathPosition],
    ) -> None:
        """Visit the value of an object property under its key."""
        key_node = pair.child_by_field_name("key")
        value_node = pair.child_by_field_name("value")
        if key_node is None or value_node is None or key_node.type != "string":
            return
        key = json.loads(key_node.text.decode("utf-8"))
        self._visit(value_node, [*tokens, key], mapper.range(key_node), mapper, positions)


def build_position_map(text: str) -> dict[str, PathPosition]:
    """Return the position map of ``text`` using a fresh PositionIndexer."""
    return PositionIndexer().build(text)
