"""EditorSession: mediator between the text editor and the graph view.

The session owns the two pieces of mutable state and is the only place that
replaces them:

- the committed ``DocumentSnapshot`` (text, parsed value, position map)
- the ``ViewState`` (collapse set and the current graph, whose node
  positions double as the drag-position cache)

Each is an immutable object swapped as a whole, so a reader always sees a
consistent snapshot. Commands arrive through ``dispatch``; state changes are
announced to subscribers as typed events.

Text changes and collapse toggles are cheap and synchronous: they record the
request and schedule a rebuild through a trailing ``Debouncer``. The rebuild
(re-parse, re-index, re-build the graph) runs from ``tick`` once the quiet
period has passed, and a newer request supersedes a pending one.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from json_graph_view.commands import (
    Command,
    DocumentChanged,
    EditValue,
    Event,
    FocusChanged,
    FormatDocument,
    GraphChanged,
    MoveCursor,
    MoveNode,
    RevealPath,
    SetText,
    ToggleCollapse,
)
from json_graph_view.config import SessionConfig
from json_graph_view.debounce import Debouncer
from json_graph_view.document import DocumentParser, DocumentSnapshot
from json_graph_view.errors import InvalidDocumentError
from json_graph_view.graph.builder import GraphBuilder
from json_graph_view.graph.nodes import Graph, NodePosition
from json_graph_view.position.resolver import find_path_at, range_for_path
from json_graph_view.position.types import Position
from json_graph_view.values import dumps, edit_value

__all__ = ["EditorSession", "ViewState"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ViewState:
    """Collapse set and current graph, replaced together.

    Attributes:
        collapsed: Paths whose descendants are hidden.
        graph:     The graph of the last rebuild, with any manual drags applied.
    """

    collapsed: frozenset[str] = frozenset()
    graph: Graph = field(default_factory=Graph)


class EditorSession:
    """Coordinates document parsing, cursor sync, value edits and graph builds.

    Args:
        text:   Initial document text. Parsed and built immediately.
        config: Session parameters. Defaults to ``SessionConfig()``.
        clock:  Monotonic clock in seconds, used for debouncing.

    Example::

        session = EditorSession('{"enabled": true}')
        session.dispatch(MoveCursor(line=1, column=14))   # '$.enabled'
        session.dispatch(EditValue("$.enabled", "false"))
        session.flush()
        session.document.value                            # {'enabled': False}
    """

    def __init__(
        self,
        text: str = "",
        config: SessionConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config if config is not None else SessionConfig()
        self._parser = DocumentParser(cache_size=self._config.parse_cache_size)
        self._builder = GraphBuilder(config=self._config.layout)
        self._debouncer = Debouncer(self._config.debounce_seconds, clock=clock)
        self._listeners: dict[type, list[Callable[[Any], None]]] = defaultdict(list)
        self._handlers: dict[type, Callable[[Any], Any]] = {
            SetText: self._set_text,
            EditValue: self._edit_value,
            ToggleCollapse: self._toggle_collapse,
            MoveNode: self._move_node,
            MoveCursor: self._move_cursor,
            RevealPath: self._reveal_path,
            FormatDocument: self._format_document,
        }

        self._text = text
        self._document = self._parser.parse(text)
        self._view = ViewState(graph=self._build_graph(self._document, ViewState()))
        self._focus_path: str | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The latest document text, possibly not yet parsed."""
        return self._text

    @property
    def document(self) -> DocumentSnapshot:
        """The committed snapshot of the last rebuild."""
        return self._document

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def graph(self) -> Graph:
        return self._view.graph

    @property
    def collapsed(self) -> frozenset[str]:
        return self._view.collapsed

    @property
    def focus_path(self) -> str | None:
        """Path under the editor cursor, as of the last MoveCursor."""
        return self._focus_path

    @property
    def rebuild_pending(self) -> bool:
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # Messaging
    # ------------------------------------------------------------------

    def subscribe(self, event_type: type, listener: Callable[[Any], None]) -> None:
        """Call ``listener(event)`` for every published event of ``event_type``."""
        self._listeners[event_type].append(listener)

    def _publish(self, event: Event) -> None:
        for listener in self._listeners.get(type(event), ()):
            listener(event)

    def dispatch(self, command: Command) -> Any:
        """Apply a command and return its result.

        Returns:
            ``EditValue``: the new root value. ``MoveCursor``: the focus path.
            ``RevealPath``: the start Position of the value, or None.
            Other commands: None.

        Raises:
            TypeError: If ``command`` is not a known command type.
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            msg = f"Unknown command: {type(command).__name__}"
            raise TypeError(msg)
        return handler(command)

    # ------------------------------------------------------------------
    # Rebuild scheduling
    # ------------------------------------------------------------------

    def tick(self) -> bool:
        """Run the pending rebuild if its quiet period has passed.

        Returns:
            True if a rebuild ran.
        """
        return self._debouncer.poll()

    def flush(self) -> bool:
        """Run the pending rebuild now.

        Returns:
            True if a rebuild ran.
        """
        return self._debouncer.flush()

    def _schedule_rebuild(self) -> None:
        self._debouncer.schedule(self._rebuild)

    def _rebuild(self) -> None:
        if self._text != self._document.text:
            self._commit_document()
        view = self._view
        graph = self._build_graph(self._document, view)
        self._view = ViewState(collapsed=view.collapsed, graph=graph)
        logger.debug("Rebuilt graph: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
        self._publish(GraphChanged(graph))

    def _commit_document(self) -> None:
        self._document = self._parser.parse(self._text)
        logger.debug(
            "Committed document: valid=%s, %d positions",
            self._document.valid,
            len(self._document.positions),
        )
        self._publish(DocumentChanged(self._document))

    def _build_graph(self, document: DocumentSnapshot, view: ViewState) -> Graph:
        if not document.valid:
            return Graph()
        try:
            return self._builder.build(
                document.value,
                previous_nodes=view.graph.nodes,
                collapsed=view.collapsed,
            )
        except RecursionError:
            logger.warning("Document nested too deeply to build a graph")
            return Graph()

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def _set_text(self, command: SetText) -> None:
        self._text = command.text
        self._schedule_rebuild()

    def _edit_value(self, command: EditValue) -> Any:
        # the edit must apply to the value of the latest text, not a stale one
        if self._text != self._document.text:
            self._commit_document()
        if not self._document.valid:
            msg = f"Cannot edit {command.path}: {self._document.error_message}"
            raise InvalidDocumentError(msg)

        new_root = edit_value(self._document.value, command.path, command.text)
        self._text = dumps(new_root, indent=self._config.indent)
        self._schedule_rebuild()
        return new_root

    def _toggle_collapse(self, command: ToggleCollapse) -> None:
        collapsed = self._view.collapsed ^ {command.path}
        self._view = ViewState(collapsed=collapsed, graph=self._view.graph)
        self._schedule_rebuild()

    def _move_node(self, command: MoveNode) -> None:
        position = NodePosition(x=command.x, y=command.y)
        nodes = [
            replace(node, position=position) if node.id == command.path else node
            for node in self._view.graph.nodes
        ]
        graph = Graph(nodes=nodes, edges=self._view.graph.edges)
        self._view = ViewState(collapsed=self._view.collapsed, graph=graph)

    def _move_cursor(self, command: MoveCursor) -> str | None:
        if not self._document.valid:
            return self._focus_path
        path = find_path_at(self._document.positions, command.line, command.column)
        if path != self._focus_path:
            self._focus_path = path
            self._publish(FocusChanged(path))
        return path

    def _reveal_path(self, command: RevealPath) -> Position | None:
        found = range_for_path(self._document.positions, command.path)
        return found.start if found is not None else None

    def _format_document(self, command: FormatDocument) -> None:
        if self._text != self._document.text:
            self._commit_document()
        formatted = self._document.formatted(indent=self._config.indent)
        if formatted is None:
            return
        self._text = formatted
        self._schedule_rebuild()
