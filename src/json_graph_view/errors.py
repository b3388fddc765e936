"""Exception hierarchy for json-graph-view.

Every error raised on purpose by the package derives from ``JsonGraphError``.
Structural mutation failures ("this path cannot be written") and kind
mismatches ("this value has the wrong type for the slot") are separate types.
"""

from __future__ import annotations

__all__ = [
    "InvalidDocumentError",
    "InvalidInputError",
    "JsonGraphError",
    "KindMismatchError",
    "PathSyntaxError",
    "RepairError",
    "StructuralUpdateError",
]


class JsonGraphError(Exception):
    """Base class for all json-graph-view errors."""


class PathSyntaxError(JsonGraphError, ValueError):
    """A path string does not start with the ``$`` root marker."""


class StructuralUpdateError(JsonGraphError):
    """A path cannot be written in the given value tree.

    Raised when an index token meets a non-array, a key token meets a
    non-object, an index is out of bounds, or a key does not exist.
    """


class InvalidInputError(JsonGraphError, ValueError):
    """Freeform text cannot be parsed as the requested kind."""


class KindMismatchError(JsonGraphError):
    """A parsed value does not have the kind of the slot it would replace.

    Attributes:
        expected: Kind of the slot being edited.
        actual:   Kind of the value that was supplied.
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Kind mismatch: expected {expected}, got {actual}")


class InvalidDocumentError(JsonGraphError):
    """An operation needs a parsed value but the document text is not valid JSON."""


class RepairError(JsonGraphError):
    """The repair service returned something that is not a usable fix."""
