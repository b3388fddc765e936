"""Canonical path strings for addressing values inside a JSON document.

A path is a sequence of tokens: ``int`` for an array index, ``str`` for an
object key. The empty sequence is the document root. The canonical string
form is ``$`` followed by one segment per token:

- ``.name``      when the key is a safe identifier (``[A-Za-z_$][A-Za-z0-9_$]*``)
- ``[n]``        for an integer index
- ``["text"]``   for any other key, with ``\\`` and ``"`` backslash-escaped

Example::

    encode_path(["meta", "tags", 1])     # '$.meta.tags[1]'
    encode_path(["a b", 0])              # '$["a b"][0]'
    decode_path("$.meta.tags[1]")        # ['meta', 'tags', 1]

Canonical strings are used as node and edge identifiers across graph
rebuilds, so the encoding must stay stable.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from json_graph_view.errors import PathSyntaxError

__all__ = [
    "ROOT",
    "PathToken",
    "ancestor_paths",
    "child_path",
    "decode_path",
    "encode_path",
    "is_safe_identifier",
    "parent_path",
]

PathToken = str | int

ROOT = "$"

_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_IDENTIFIER_CHAR = re.compile(r"[A-Za-z0-9_$]")
# Leading integer of a bracket segment; anything after it is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_safe_identifier(key: str) -> bool:
    """Return True if ``key`` can be written as a ``.name`` segment."""
    return _IDENTIFIER.fullmatch(key) is not None


def _segment(token: PathToken) -> str:
    # bool subclasses int; True is not an array index
    if isinstance(token, bool):
        msg = f"Path tokens must be str or int, got bool {token!r}"
        raise TypeError(msg)
    if isinstance(token, int):
        return f"[{token}]"
    if isinstance(token, str):
        if is_safe_identifier(token):
            return f".{token}"
        escaped = token.replace("\\", "\\\\").replace('"', '\\"')
        return f'["{escaped}"]'
    msg = f"Path tokens must be str or int, got {type(token).__name__}"
    raise TypeError(msg)


def encode_path(tokens: Iterable[PathToken]) -> str:
    """Encode a token sequence as a canonical path string.

    Args:
        tokens: Keys (``str``) and indices (``int``) from the root downwards.

    Returns:
        The canonical string; ``"$"`` for an empty sequence.

    Raises:
        TypeError: If a token is neither ``str`` nor a non-bool ``int``.
    """
    return ROOT + "".join(_segment(token) for token in tokens)


def decode_path(path: str) -> list[PathToken]:
    """Decode a path string into its token sequence.

    Decoding is lenient: the only hard failure is a missing ``$`` prefix.
    Characters that do not start a segment are skipped, an empty ``.``
    segment is dropped, an unterminated ``["...`` segment yields the text
    read so far, and a ``[...]`` segment without a leading integer is
    dropped.

    Args:
        path: A path string such as ``'$.meta.tags[1]'``.

    Returns:
        The list of tokens; empty for ``"$"``.

    Raises:
        PathSyntaxError: If ``path`` does not start with ``$``.
    """
    if not path.startswith(ROOT):
        msg = f"Path must start with {ROOT!r}: {path!r}"
        raise PathSyntaxError(msg)

    tokens: list[PathToken] = []
    i = 1
    n = len(path)

    while i < n:
        char = path[i]

        if char == ".":
            i += 1
            start = i
            while i < n and _IDENTIFIER_CHAR.match(path[i]):
                i += 1
            if i > start:
                tokens.append(path[start:i])

        elif char == "[":
            i += 1
            if i < n and path[i] == '"':
                i += 1
                chars: list[str] = []
                while i < n:
                    if path[i] == "\\" and i + 1 < n:
                        chars.append(path[i + 1])
                        i += 2
                    elif path[i] == '"':
                        i += 1
                        break
                    else:
                        chars.append(path[i])
                        i += 1
                tokens.append("".join(chars))
                if i < n and path[i] == "]":
                    i += 1
            else:
                end = path.find("]", i)
                content = path[i:] if end == -1 else path[i:end]
                match = _LEADING_INT.match(content)
                if match is not None:
                    tokens.append(int(match.group(1)))
                i = n if end == -1 else end + 1

        else:
            i += 1

    return tokens


def child_path(path: str, token: PathToken) -> str:
    """Return the canonical path of ``token`` directly below ``path``."""
    return path + _segment(token)


def parent_path(path: str) -> str | None:
    """Return the canonical path of the parent, or None for the root."""
    tokens = decode_path(path)
    if not tokens:
        return None
    return encode_path(tokens[:-1])


def ancestor_paths(path: str) -> list[str]:
    """Return every canonical path from the root down to ``path`` inclusive."""
    tokens = decode_path(path)
    return [encode_path(tokens[:depth]) for depth in range(len(tokens) + 1)]
