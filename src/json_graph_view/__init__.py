"""json-graph-view - bidirectional JSON text/graph addressing and editing."""

from __future__ import annotations

from json_graph_view.api import path_at, range_of, to_graph
from json_graph_view.commands import (
    DocumentChanged,
    EditValue,
    FocusChanged,
    FormatDocument,
    GraphChanged,
    MoveCursor,
    MoveNode,
    RevealPath,
    SetText,
    ToggleCollapse,
)
from json_graph_view.config import LayoutConfig, SessionConfig
from json_graph_view.document import DocumentParser, DocumentSnapshot
from json_graph_view.errors import (
    InvalidDocumentError,
    InvalidInputError,
    JsonGraphError,
    KindMismatchError,
    PathSyntaxError,
    RepairError,
    StructuralUpdateError,
)
from json_graph_view.graph import Graph, GraphBuilder, GraphEdge, GraphEntry, GraphNode
from json_graph_view.paths import decode_path, encode_path
from json_graph_view.position import PathPosition, Position, PositionIndexer, Range
from json_graph_view.session import EditorSession
from json_graph_view.values import (
    MISSING,
    JsonKind,
    classify,
    get_value,
    parse_typed_input,
    update_value,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "DocumentChanged",
    "DocumentParser",
    "DocumentSnapshot",
    "EditValue",
    "EditorSession",
    "FocusChanged",
    "FormatDocument",
    "Graph",
    "GraphBuilder",
    "GraphChanged",
    "GraphEdge",
    "GraphEntry",
    "GraphNode",
    "InvalidDocumentError",
    "InvalidInputError",
    "JsonGraphError",
    "JsonKind",
    "KindMismatchError",
    "LayoutConfig",
    "MoveCursor",
    "MoveNode",
    "PathPosition",
    "PathSyntaxError",
    "Position",
    "PositionIndexer",
    "Range",
    "RepairError",
    "RevealPath",
    "SessionConfig",
    "SetText",
    "StructuralUpdateError",
    "ToggleCollapse",
    "classify",
    "decode_path",
    "encode_path",
    "get_value",
    "parse_typed_input",
    "path_at",
    "range_of",
    "to_graph",
    "update_value",
]
