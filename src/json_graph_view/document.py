"""DocumentSnapshot and DocumentParser: one parse of the document text.

A snapshot bundles the text with everything derived from a single parse of
it: validity, the error message, the parsed value and the position map. It
is immutable and replaced as a whole whenever the text changes, so readers
never see a value from one text and positions from another.

Parsing is cached: ``DocumentParser`` keeps recent snapshots in an LRU cache
keyed by the exact text, so switching back to a text seen recently (format,
undo in the editor, re-applying a fix) does not re-parse it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from cachetools import LRUCache

from json_graph_view.position.indexer import PositionIndexer
from json_graph_view.position.types import PathPosition
from json_graph_view.values import dumps, loads

__all__ = [
    "EMPTY_DOCUMENT_MESSAGE",
    "TOO_DEEP_MESSAGE",
    "DocumentParser",
    "DocumentSnapshot",
    "parse_document",
]

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_MESSAGE = "JSON document is empty"
TOO_DEEP_MESSAGE = "JSON document is nested too deeply"

_NO_POSITIONS: Mapping[str, PathPosition] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """Immutable result of parsing one document text.

    Attributes:
        text:          The document text that was parsed.
        valid:         True when the text is a single valid JSON value.
        error_message: Parse error shown to the user; empty when valid.
        value:         The parsed value; None when invalid.
        positions:     Read-only path -> PathPosition map; empty when invalid.
    """

    text: str
    valid: bool
    error_message: str = ""
    value: Any = None
    positions: Mapping[str, PathPosition] = field(default_factory=lambda: _NO_POSITIONS)

    def formatted(self, indent: int = 2) -> str | None:
        """Return the pretty-printed text of a valid document, else None."""
        if not self.valid:
            return None
        return dumps(self.value, indent=indent)


class DocumentParser:
    """Parses document text into DocumentSnapshots, with an LRU cache.

    Each instance owns its own cache and PositionIndexer.

    Args:
        cache_size: Number of snapshots kept. Defaults to 32.
        indexer:    PositionIndexer to use. A new one is created when None.
    """

    def __init__(self, cache_size: int = 32, indexer: PositionIndexer | None = None) -> None:
        self._indexer = indexer if indexer is not None else PositionIndexer()
        self._cache: LRUCache[str, DocumentSnapshot] = LRUCache(maxsize=cache_size)

    @property
    def cache_size(self) -> int:
        """The current number of cached snapshots."""
        return int(self._cache.currsize)

    def parse(self, text: str) -> DocumentSnapshot:
        """Return the snapshot of ``text``, parsing it on a cache miss."""
        cached = self._cache.get(text)
        if cached is not None:
            return cached
        snapshot = self._parse(text)
        self._cache[text] = snapshot
        return snapshot

    def _parse(self, text: str) -> DocumentSnapshot:
        if not text.strip():
            return DocumentSnapshot(text=text, valid=False, error_message=EMPTY_DOCUMENT_MESSAGE)

        try:
            value = loads(text)
        except ValueError as exc:
            logger.debug("Document does not parse: %s", exc)
            return DocumentSnapshot(text=text, valid=False, error_message=str(exc))
        except RecursionError:
            logger.debug("Document exceeds the recursion limit")
            return DocumentSnapshot(text=text, valid=False, error_message=TOO_DEEP_MESSAGE)

        positions = self._indexer.build(text)
        return DocumentSnapshot(
            text=text,
            valid=True,
            value=value,
            positions=MappingProxyType(positions),
        )


def parse_document(text: str) -> DocumentSnapshot:
    """Parse ``text`` once, without caching."""
    return DocumentParser(cache_size=1).parse(text)
