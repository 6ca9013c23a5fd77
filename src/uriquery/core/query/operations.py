"""Query scanning and normalization."""

from __future__ import annotations

from uriquery.core.charset import (
    QUERY_CHAR_MAP,
    ByteClass,
    PercentDecodeError,
    decode_percent,
    is_unreserved,
)
from uriquery.core.query.models import (
    BorrowedContent,
    InvalidQueryError,
    InvalidQueryKind,
    OwnedContent,
    Query,
    QueryContent,
)
from uriquery.core.types import QueryInput

_PERCENT = 0x25
_ASCII_UPPER = bytes(range(256)).upper()


def _as_view(value: QueryInput) -> memoryview:
    if isinstance(value, str):
        # Non-ASCII text encodes to bytes >= 0x80, which the scanner rejects
        return memoryview(value.encode("utf-8"))
    view = memoryview(value)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast("B")


def _content(view: memoryview) -> QueryContent:
    # Only `bytes` is borrowed; writable buffers are copied
    if isinstance(view.obj, bytes):
        return BorrowedContent(view)
    return OwnedContent(bytearray(view))


def _remainder(value: QueryInput, view: memoryview, end: int) -> QueryInput:
    # Everything before `end` is ASCII, so byte and character offsets agree
    if isinstance(value, str | bytes):
        return value[end:]
    return view[end:]


def scan_query(view: memoryview) -> tuple[int, bool]:
    """Scan a query from the start of `view` in a single left-to-right pass.

    Stops at `#` or end of input. Percent-encoded triplets are validated but
    left untouched.

    Args:
        view: Raw input bytes.

    Returns:
        Tuple of (length of the query prefix, True if already canonical).

    Raises:
        InvalidQueryError: On an invalid character or malformed percent-encoding.
    """
    index = 0
    length = len(view)
    normalized = True

    while index < length:
        byte_class = QUERY_CHAR_MAP[view[index]]

        if byte_class is ByteClass.LITERAL:
            index += 1
        elif byte_class is ByteClass.PERCENT:
            first = view[index + 1] if index + 1 < length else None
            second = view[index + 2] if index + 2 < length else None
            try:
                value, canonical = decode_percent(first, second)
            except PercentDecodeError as e:
                raise InvalidQueryError(InvalidQueryKind.INVALID_PERCENT_ENCODING, index) from e

            if not canonical or is_unreserved(value):
                normalized = False
            index += 3
        elif byte_class is ByteClass.FRAGMENT:
            break
        else:
            raise InvalidQueryError(InvalidQueryKind.INVALID_CHARACTER, index)

    return index, normalized


def parse_query(value: QueryInput) -> tuple[Query, QueryInput]:
    """Parse a query from the start of `value`.

    The query ends at the first `#` or at end of input. The returned query
    borrows the input without copying when it is backed by `bytes`; writable
    buffers such as `bytearray` are copied into an owned buffer.

    Args:
        value: Text or bytes, typically what follows `?` in a URI.

    Returns:
        Tuple of (query, remainder). The remainder starts at `#` (or is empty)
        and has the same type as `value`; other buffers yield a memoryview.

    Raises:
        InvalidQueryError: If the query part is invalid.
    """
    view = _as_view(value)
    end, normalized = scan_query(view)
    query = Query(_content(view[:end]), normalized)
    return query, _remainder(value, view, end)


def parse_query_exact(value: QueryInput) -> Query:
    """Parse `value` as exactly one query with no remainder.

    Raises:
        InvalidQueryError: If the query is invalid, or EXPECTED_EOF if input
            continues past it (e.g. `"my=query#fragment"`).
    """
    view = _as_view(value)
    end, normalized = scan_query(view)
    if end != len(view):
        raise InvalidQueryError(InvalidQueryKind.EXPECTED_EOF, end)
    return Query(_content(view), normalized)


def normalize_in_place(buffer: bytearray) -> None:
    """Rewrite validated query bytes into canonical form without growing the buffer.

    Percent-encoded unreserved characters are decoded to their literal byte,
    other triplets are kept with uppercase hex digits. The write position
    never passes the read position, so compaction never clobbers unread bytes.

    Args:
        buffer: Query bytes already accepted by `scan_query`.
    """
    read_index = 0
    write_index = 0
    length = len(buffer)

    while read_index < length:
        byte = buffer[read_index]

        if byte == _PERCENT:
            first = buffer[read_index + 1]
            second = buffer[read_index + 2]
            value, _ = decode_percent(first, second)
            read_index += 3

            if is_unreserved(value):
                buffer[write_index] = value
                write_index += 1
            else:
                buffer[write_index] = _PERCENT
                buffer[write_index + 1] = _ASCII_UPPER[first]
                buffer[write_index + 2] = _ASCII_UPPER[second]
                write_index += 3
        else:
            buffer[write_index] = byte
            write_index += 1
            read_index += 1

    del buffer[write_index:]
