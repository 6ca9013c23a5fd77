"""Byte classification tables for the query component.

Usage:
    QUERY_CHAR_MAP[ord("a")]     # ByteClass.LITERAL
    QUERY_CHAR_MAP[ord("%")]     # ByteClass.PERCENT
    QUERY_CHAR_MAP[ord("#")]     # ByteClass.FRAGMENT
    UNRESERVED_CHAR_MAP[ord("~")]  # True
"""

from __future__ import annotations

from enum import Enum, auto
from string import ascii_letters, digits


class ByteClass(Enum):
    """What the scanner should do with a raw byte."""

    LITERAL = auto()
    """Allowed as-is inside a query."""

    PERCENT = auto()
    """Starts a percent-encoded triplet."""

    FRAGMENT = auto()
    """The `#` delimiter. Ends the query without being an error."""

    INVALID = auto()
    """Not allowed anywhere in a query."""


UNRESERVED_CHARS = ascii_letters + digits + "-._~"
SUB_DELIMS = "!$&'()*+,;="
QUERY_LITERAL_CHARS = UNRESERVED_CHARS + SUB_DELIMS + ":@/?"

HEX_DIGITS = b"0123456789ABCDEFabcdef"


def _build_query_char_map() -> tuple[ByteClass, ...]:
    table = [ByteClass.INVALID] * 256
    for char in QUERY_LITERAL_CHARS:
        table[ord(char)] = ByteClass.LITERAL
    table[ord("%")] = ByteClass.PERCENT
    table[ord("#")] = ByteClass.FRAGMENT
    return tuple(table)


QUERY_CHAR_MAP: tuple[ByteClass, ...] = _build_query_char_map()
"""256-entry table: raw byte -> ByteClass."""

UNRESERVED_CHAR_MAP: tuple[bool, ...] = tuple(chr(b) in UNRESERVED_CHARS for b in range(256))
"""256-entry table: decoded byte value -> is unreserved."""

HEX_VALUE_MAP: tuple[int | None, ...] = tuple(
    int(chr(b), 16) if b in HEX_DIGITS else None for b in range(256)
)
"""256-entry table: raw byte -> hex digit value, or None if not a hex digit."""
