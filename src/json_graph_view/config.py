"""LayoutConfig and SessionConfig for graph layout and editor sessions.

Both are frozen (immutable) dataclasses validated on construction.
LayoutConfig holds the fixed geometry of the layered graph layout;
SessionConfig holds the timing and caching parameters of an EditorSession.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["LayoutConfig", "SessionConfig"]


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable geometry for the layered graph layout.

    Attributes:
        horizontal_spacing: Distance between two depth layers on the x axis.
        node_gap: Vertical gap between consecutive nodes of one layer.
        base_height: Height of a node with no entries (header only).
        row_height: Height added per entry row.
    """

    horizontal_spacing: float = 400.0
    node_gap: float = 40.0
    base_height: float = 60.0
    row_height: float = 36.0

    def __post_init__(self) -> None:
        for name in ("horizontal_spacing", "node_gap", "base_height", "row_height"):
            value = getattr(self, name)
            if value < 0.0:
                msg = f"{name} must be >= 0.0, got {value}"
                raise ValueError(msg)

    def node_height(self, entry_count: int) -> float:
        """Return the rendered height of a node holding ``entry_count`` entries."""
        return self.base_height + self.row_height * entry_count


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable configuration for an EditorSession.

    Attributes:
        debounce_seconds: Quiet period after the last change before derived
            structures (position map, graph) are rebuilt.
        parse_cache_size: Number of parsed document snapshots kept in the
            LRU cache, keyed by document text.
        indent: Indentation used when the session re-serialises a value
            (value edits, formatting).
        layout: Geometry passed to the GraphBuilder.
    """

    debounce_seconds: float = 0.25
    parse_cache_size: int = 32
    indent: int = 2
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self) -> None:
        if self.debounce_seconds < 0.0:
            msg = f"debounce_seconds must be >= 0.0, got {self.debounce_seconds}"
            raise ValueError(msg)
        if self.parse_cache_size < 1:
            msg = f"parse_cache_size must be >= 1, got {self.parse_cache_size}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
