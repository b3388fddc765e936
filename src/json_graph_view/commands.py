"""Typed commands accepted by EditorSession.dispatch and events it publishes.

Commands are requests from the editing and visualisation surfaces; events
are notifications the session sends to subscribers after its state changed.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_graph_view.document import DocumentSnapshot
from json_graph_view.graph.nodes import Graph

__all__ = [
    "Command",
    "DocumentChanged",
    "EditValue",
    "Event",
    "FocusChanged",
    "FormatDocument",
    "GraphChanged",
    "MoveCursor",
    "MoveNode",
    "RevealPath",
    "SetText",
    "ToggleCollapse",
]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SetText:
    """The user changed the document text."""

    text: str


@dataclass(frozen=True, slots=True)
class EditValue:
    """Replace the value at ``path`` with ``text`` parsed as the slot's kind."""

    path: str
    text: str


@dataclass(frozen=True, slots=True)
class ToggleCollapse:
    """Collapse ``path`` if it is expanded, expand it if it is collapsed."""

    path: str


@dataclass(frozen=True, slots=True)
class MoveNode:
    """The user dragged node ``path`` to (x, y)."""

    path: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class MoveCursor:
    """The editor cursor moved to a 1-based (line, column)."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class RevealPath:
    """A node or tree row was clicked; find its location in the text."""

    path: str


@dataclass(frozen=True, slots=True)
class FormatDocument:
    """Pretty-print the document text."""


Command = SetText | EditValue | ToggleCollapse | MoveNode | MoveCursor | RevealPath | FormatDocument


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DocumentChanged:
    """A new document snapshot was committed."""

    snapshot: DocumentSnapshot


@dataclass(frozen=True, slots=True)
class GraphChanged:
    """A new graph was built."""

    graph: Graph


@dataclass(frozen=True, slots=True)
class FocusChanged:
    """The path under the editor cursor changed."""

    path: str | None


Event = DocumentChanged | GraphChanged | FocusChanged
