"""Helpers for headers, query strings and form bodies."""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Iterator
from typing import IO, Union
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_MISSING = object()

_HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))
_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))
_ILLEGAL = frozenset(b"%<>{}|\\\"^`!*'()$,[]")
_QUERY_RESERVED = "=&+;"
_CHUNK_SIZE = 8192


class NameValueCollection:
    """An ordered multimap of names to values with case-insensitive names."""

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[tuple[str, str]] = []
        for name, value in items:
            self.add(name, value)

    def add(self, name: str, value: str) -> None:
        """Append a name/value pair, keeping any existing ones."""
        self._items.append((name, value))

    def set(self, name: str, value: str) -> None:
        """Replace the first value stored under ``name``, or add it."""
        key = name.lower()
        for position, (existing, _) in enumerate(self._items):
            if existing.lower() == key:
                self._items[position] = (existing, value)
                return
        self._items.append((name, value))

    def get(self, name: str, default=_MISSING) -> str:
        """Return the first value for ``name``.

        Raises KeyError if the name is absent and no default is given.
        """
        key = name.lower()
        for existing, value in self._items:
            if existing.lower() == key:
                return value
        if default is _MISSING:
            raise KeyError(name)
        return default

    def get_all(self, name: str) -> list[str]:
        """Return every value stored under ``name`` in insertion order."""
        key = name.lower()
        return [value for existing, value in self._items if existing.lower() == key]

    def has(self, name: str) -> bool:
        """Return True if at least one value is stored under ``name``."""
        key = name.lower()
        return any(existing.lower() == key for existing, _ in self._items)

    def erase(self, name: str) -> None:
        """Remove every value stored under ``name``."""
        key = name.lower()
        self._items = [item for item in self._items if item[0].lower() != key]

    def clear(self) -> None:
        """Remove every entry."""
        self._items.clear()

    def copy(self) -> NameValueCollection:
        """Return an independent copy."""
        return NameValueCollection(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameValueCollection):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _url_decode(text: str) -> str:
    """Percent-decode ``text``; '+' is left as is."""
    out = bytearray()
    data = iter(text.encode("utf-8"))
    for byte in data:
        if byte != ord("%"):
            out.append(byte)
            continue
        try:
            high = next(data)
            low = next(data)
        except StopIteration:
            raise ValueError("incomplete percent encoding in URI") from None
        if high not in _HEX_DIGITS or low not in _HEX_DIGITS:
            raise ValueError("no hex digit following percent sign in URI")
        out.append(int(bytes((high, low)), 16))
    return out.decode("utf-8", errors="replace")


def _url_encode(text: str, reserved: str) -> str:
    """Percent-encode ``text``, escaping ``reserved`` characters too."""
    reserved_bytes = frozenset(reserved.encode("utf-8"))
    parts = []
    for byte in text.encode("utf-8"):
        if byte in _UNRESERVED:
            parts.append(chr(byte))
        elif byte <= 0x20 or byte >= 0x7F or byte in _ILLEGAL or byte in reserved_bytes:
            parts.append(f"%{byte:02X}")
        else:
            parts.append(chr(byte))
    return "".join(parts)


def split_text_plain_post(text_plain: str) -> NameValueCollection:
    """Parse a text/plain form body of ``name=value`` lines.

    Lines without an '=' are skipped; the value is everything after the
    first '='.
    """
    collection = NameValueCollection()
    for line in text_plain.split("\n"):
        name, separator, value = line.partition("=")
        if separator:
            collection.add(name, value)
    return collection


def split_and_url_decode(encoded: str) -> NameValueCollection:
    """Parse an ``a=b&c=d`` string into decoded name/value pairs.

    Empty segments are ignored. Raises ValueError on bad percent escapes.
    """
    collection = NameValueCollection()
    for argument in filter(None, encoded.split("&")):
        tokens = [token for token in argument.split("=") if token]
        if not tokens:
            continue
        name = _url_decode(tokens[0])
        value = _url_decode(tokens[1]) if len(tokens) > 1 else ""
        collection.add(name, value)
    return collection


def get_query_map(uri: str) -> NameValueCollection:
    """Return the decoded query parameters of ``uri``."""
    if not uri:
        return NameValueCollection()
    query = urlsplit(uri).query
    if not query:
        return NameValueCollection()
    return split_and_url_decode(query)


def make_query_string(query: Iterable[tuple[str, str]]) -> str:
    """Build an encoded ``a=b&c=d`` query string from name/value pairs."""
    return "&".join(
        f"{_url_encode(name, _QUERY_RESERVED)}={_url_encode(value, _QUERY_RESERVED)}"
        for name, value in query
    )


def dump_headers(*args: Iterable[tuple[str, str]], level: int = logging.DEBUG) -> None:
    """Log every ``name: value`` pair of each collection at ``level``."""
    if not logger.isEnabledFor(level):
        return
    for collection in args:
        for name, value in collection:
            logger.log(level, "%s: %s", name, value)


def consume(stream: IO[Union[bytes, str]]) -> int:
    """Read ``stream`` to its end, discarding the data.

    Returns the number of bytes (or characters) read.
    """
    total = 0
    while chunk := stream.read(_CHUNK_SIZE):
        total += len(chunk)
    return total