"""Reading, classifying and persistently updating JSON values by path.

JSON values are plain Python objects: ``None``, ``bool``, ``int``/``float``,
``str``, ``list`` and ``dict`` (insertion ordered). ``classify`` is the single
place that maps a value onto its ``JsonKind``; every other module asks it
instead of inspecting types itself.

Updates are persistent: ``update_value`` copies only the containers on the
root-to-target path and reuses every sibling subtree by reference, so the
input tree is never modified, even when the update fails half way.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Sequence
from enum import Enum, StrEnum, auto
from typing import Any, Final

from json_graph_view.errors import (
    InvalidInputError,
    KindMismatchError,
    StructuralUpdateError,
)
from json_graph_view.paths import PathToken, decode_path, encode_path

__all__ = [
    "MISSING",
    "JsonKind",
    "classify",
    "dumps",
    "edit_value",
    "format_for_edit",
    "get_value",
    "is_composite",
    "loads",
    "parse_typed_input",
    "summarize",
    "update_value",
]


class JsonKind(StrEnum):
    """The six kinds of JSON value.

    StrEnum values are the lowercased member names, e.g. ``JsonKind.ARRAY ==
    "array"``.
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


class _Missing(Enum):
    MISSING = auto()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing.MISSING
"""Returned by ``get_value`` when a path does not resolve to a value."""

_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


def classify(value: Any) -> JsonKind:
    """Return the JsonKind of a JSON value.

    Raises:
        TypeError: If ``value`` is not a JSON value.
    """
    if value is None:
        return JsonKind.NULL
    # CRITICAL: bool MUST be checked before int, bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise TypeError(msg)


def is_composite(value: Any) -> bool:
    """Return True for objects and arrays."""
    return classify(value) in (JsonKind.OBJECT, JsonKind.ARRAY)


def _reject_constant(name: str) -> Any:
    msg = f"Invalid JSON constant: {name}"
    raise ValueError(msg)


def loads(text: str) -> Any:
    """Parse JSON text strictly (``NaN`` and ``Infinity`` are rejected).

    Raises:
        ValueError: ``json.JSONDecodeError`` for malformed text, or a plain
            ``ValueError`` for a non-standard constant.
    """
    return json.loads(text, parse_constant=_reject_constant)


def dumps(value: Any, indent: int | None = 2) -> str:
    """Serialise a JSON value for the editor, keeping non-ASCII text as is."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def _tokens(path: str | Sequence[PathToken]) -> list[PathToken]:
    if isinstance(path, str):
        return decode_path(path)
    return list(path)


# ---------------------------------------------------------------------------
# Access
# ---------------------------------------------------------------------------


def get_value(value: Any, path: str | Sequence[PathToken]) -> Any:
    """Return the value at ``path``, or ``MISSING`` if there is none.

    Traversal stops with ``MISSING`` at a scalar, at a token of the wrong
    type for the container, at an out-of-range index, or at a missing key.

    Args:
        value: Root JSON value.
        path:  Canonical path string or token sequence.
    """
    current = value
    for token in _tokens(path):
        if isinstance(current, list):
            if isinstance(token, bool) or not isinstance(token, int):
                return MISSING
            if not 0 <= token < len(current):
                return MISSING
            current = current[token]
        elif isinstance(current, dict):
            if not isinstance(token, str) or token not in current:
                return MISSING
            current = current[token]
        else:
            return MISSING
    return current


# ---------------------------------------------------------------------------
# Persistent update
# ---------------------------------------------------------------------------


def update_value(value: Any, path: str | Sequence[PathToken], new_value: Any) -> Any:
    """Return a new root with ``new_value`` written at ``path``.

    Only the containers on the root-to-target path are copied; every other
    subtree of the result is the identical object found in ``value``. The
    path must already exist: no key or index is ever inserted.

    Args:
        value:     Root JSON value (never modified).
        path:      Canonical path string or token sequence. An empty path
                   replaces the root.
        new_value: Value to store.

    Returns:
        The new root value.

    Raises:
        StructuralUpdateError: If a token does not fit the container it is
            applied to, an index is out of bounds, a key is missing, or the
            path runs through a scalar.
    """
    tokens = _tokens(path)
    return _update(value, tokens, 0, new_value)


def _update(current: Any, tokens: list[PathToken], index: int, new_value: Any) -> Any:
    if index == len(tokens):
        return new_value

    token = tokens[index]
    where = encode_path(tokens[:index])

    if isinstance(current, list):
        if isinstance(token, bool) or not isinstance(token, int):
            msg = f"Expected array index at {where}, got {token!r}"
            raise StructuralUpdateError(msg)
        if not 0 <= token < len(current):
            msg = f"Array index out of bounds at {where}: {token} (length {len(current)})"
            raise StructuralUpdateError(msg)
        copied = list(current)
        copied[token] = _update(current[token], tokens, index + 1, new_value)
        return copied

    if isinstance(current, dict):
        if not isinstance(token, str):
            msg = f"Expected object key at {where}, got {token!r}"
            raise StructuralUpdateError(msg)
        if token not in current:
            msg = f"Key {token!r} does not exist at {where}"
            raise StructuralUpdateError(msg)
        copied_obj = dict(current)
        copied_obj[token] = _update(current[token], tokens, index + 1, new_value)
        return copied_obj

    msg = f"Cannot update {encode_path(tokens)}: value at {where} is a {classify(current)}"
    raise StructuralUpdateError(msg)


# ---------------------------------------------------------------------------
# Typed input
# ---------------------------------------------------------------------------


def parse_typed_input(text: str, expected_kind: JsonKind | str) -> Any:
    """Convert freeform text into a value of exactly ``expected_kind``.

    - string:  the text itself, unchanged
    - number:  a JSON numeric literal (surrounding whitespace allowed);
               ``int`` for integral literals, ``float`` otherwise
    - boolean: only ``true`` or ``false``
    - null:    only ``null``
    - object / array: full JSON parse, which must produce that kind

    There is no cross-kind coercion.

    Raises:
        InvalidInputError: If the text is not a valid literal of the kind.
        KindMismatchError: If an object/array parse yields another kind.
        ValueError: If ``expected_kind`` is not a JsonKind name.
    """
    kind = JsonKind(expected_kind)

    if kind is JsonKind.STRING:
        return text

    if kind is JsonKind.NUMBER:
        literal = text.strip()
        if _NUMBER.fullmatch(literal) is None:
            msg = f"Invalid number: {text!r}"
            raise InvalidInputError(msg)
        if any(c in literal for c in ".eE"):
            number = float(literal)
            if not math.isfinite(number):
                msg = f"Number out of range: {text!r}"
                raise InvalidInputError(msg)
            return number
        return int(literal)

    if kind is JsonKind.BOOLEAN:
        if text == "true":
            return True
        if text == "false":
            return False
        msg = 'Invalid boolean, must be "true" or "false"'
        raise InvalidInputError(msg)

    if kind is JsonKind.NULL:
        if text == "null":
            return None
        msg = 'Invalid null, must be "null"'
        raise InvalidInputError(msg)

    try:
        parsed = loads(text)
    except ValueError as exc:
        msg = f"Invalid JSON: {exc}"
        raise InvalidInputError(msg) from exc
    actual = classify(parsed)
    if actual is not kind:
        raise KindMismatchError(kind, actual)
    return parsed


def edit_value(root: Any, path: str | Sequence[PathToken], text: str) -> Any:
    """Replace the value at ``path`` with ``text`` parsed as the slot's kind.

    The kind check happens before any mutation is attempted.

    Returns:
        The new root value.

    Raises:
        StructuralUpdateError: If ``path`` does not resolve to a value.
        InvalidInputError: If ``text`` does not parse as the slot's kind.
        KindMismatchError: If ``text`` parses to a different kind.
    """
    current = get_value(root, path)
    if current is MISSING:
        where = path if isinstance(path, str) else encode_path(path)
        msg = f"No value at {where}"
        raise StructuralUpdateError(msg)
    new_value = parse_typed_input(text, classify(current))
    return update_value(root, path, new_value)


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def format_for_edit(value: Any) -> str:
    """Return the text a user edits for ``value``.

    Strings are shown raw, containers pretty-printed, other scalars as
    their JSON literal.
    """
    kind = classify(value)
    if kind is JsonKind.STRING:
        return value  # type: ignore[no-any-return]
    if kind in (JsonKind.OBJECT, JsonKind.ARRAY):
        return dumps(value, indent=2)
    return dumps(value, indent=None)


def summarize(value: Any) -> str:
    """Return the compact display text of a value inside a graph entry.

    Example::

        summarize({"a": 1, "b": 2})   # '{2 keys}'
        summarize([1, 2, 3])          # '[3 items]'
        summarize([])                 # 'Empty'
        summarize("x")                # '"x"'
    """
    kind = classify(value)
    if kind is JsonKind.OBJECT:
        return f"{{{len(value)} keys}}" if value else "Empty"
    if kind is JsonKind.ARRAY:
        return f"[{len(value)} items]" if value else "Empty"
    if kind is JsonKind.STRING:
        return f'"{value}"'
    return dumps(value, indent=None)
