"""Position subpackage: source ranges of JSON values.

Re-exports the public API for the position module:
- Position, Range, PathPosition: source location types
- PositionIndexer / build_position_map: path -> range index built from text
- find_path_at: cursor (line, column) -> most specific path
- range_for_path: path -> value range (click-to-reveal)
"""

from json_graph_view.position.indexer import PositionIndexer, build_position_map
from json_graph_view.position.resolver import find_path_at, range_for_path
from json_graph_view.position.types import PathPosition, Position, PositionMap, Range

__all__ = [
    "PathPosition",
    "Position",
    "PositionIndexer",
    "PositionMap",
    "Range",
    "build_position_map",
    "find_path_at",
    "range_for_path",
]
