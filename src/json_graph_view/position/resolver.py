"""Cursor-to-path and path-to-range lookups over a position map.

``find_path_at`` does not walk parent links: it scans every entry and keeps
the containing range with the smallest ``Range.size``. The size is a proxy
for "fewest lines, then fewest columns", so two nested constructs with equal
span on one line can resolve to the outer one. Ties keep the earlier entry,
and parents come before their children in a position map.
"""

from __future__ import annotations

from json_graph_view.position.types import PositionMap, Range

__all__ = ["find_path_at", "range_for_path"]


def find_path_at(positions: PositionMap, line: int, column: int) -> str | None:
    """Return the most specific path whose key or value range holds the cursor.

    Args:
        positions: Position map of the current document.
        line:      1-based cursor line.
        column:    1-based cursor column.

    Returns:
        The canonical path of the best match, or None if no range contains
        the position.
    """
    best_path: str | None = None
    best_size = float("inf")

    for entry in positions.values():
        for candidate in (entry.key_range, entry.value_range):
            if candidate is None or not candidate.contains(line, column):
                continue
            size = candidate.size
            if size < best_size:
                best_path = entry.path
                best_size = size

    return best_path


def range_for_path(positions: PositionMap, path: str) -> Range | None:
    """Return the value range recorded for ``path``, or None if it is unknown."""
    entry = positions.get(path)
    return entry.value_range if entry is not None else None
