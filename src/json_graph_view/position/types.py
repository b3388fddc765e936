"""Position, Range and PathPosition: source locations of JSON values.

Coordinates follow the editor convention: lines and columns are 1-based and
a range's end is the position of the character just after the construct.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

__all__ = ["PathPosition", "Position", "PositionMap", "Range"]

# Lines spanned count this much more than columns when comparing range sizes.
_LINE_WEIGHT = 1000


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A 1-based (line, column) location in the document text."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Range:
    """A source span from ``start`` up to (the character after) ``end``."""

    start: Position
    end: Position

    def contains(self, line: int, column: int) -> bool:
        """Return True if (line, column) lies inside the range.

        Line bounds are inclusive; on the first and last line the column
        bounds are inclusive too, so the position right after the construct
        still counts as inside.
        """
        if line < self.start.line or line > self.end.line:
            return False
        if line == self.start.line and column < self.start.column:
            return False
        return not (line == self.end.line and column > self.end.column)

    @property
    def size(self) -> int:
        """Approximate extent used to prefer the innermost match.

        Single-line ranges measure their column width; multi-line ranges
        measure ``end.column + 1000 * line_span``.
        """
        lines = self.end.line - self.start.line
        if lines == 0:
            return self.end.column - self.start.column
        return self.end.column + _LINE_WEIGHT * lines


@dataclass(frozen=True, slots=True)
class PathPosition:
    """Source location of the value at ``path``.

    Attributes:
        path:        Canonical path string.
        value_range: Range of the value itself.
        key_range:   Range of the property key; None for the root and for
                     array elements.
    """

    path: str
    value_range: Range
    key_range: Range | None = None


PositionMap = Mapping[str, PathPosition]
