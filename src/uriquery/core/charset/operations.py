"""Classification and percent-decoding primitives."""

from __future__ import annotations

from uriquery.core.charset.models import (
    HEX_VALUE_MAP,
    QUERY_CHAR_MAP,
    UNRESERVED_CHAR_MAP,
    ByteClass,
)


class PercentDecodeError(ValueError):
    """Raised when a `%` is not followed by two hex digits."""

    pass


def classify_byte(byte: int) -> ByteClass:
    """Classify a raw byte for the query scanner."""
    return QUERY_CHAR_MAP[byte]


def is_unreserved(value: int) -> bool:
    """Check if a decoded byte is ALPHA, DIGIT, `-`, `.`, `_` or `~`."""
    return UNRESERVED_CHAR_MAP[value]


def decode_percent(first: int | None, second: int | None) -> tuple[int, bool]:
    """Decode the two hex digits following a `%`.

    Either digit may be None when the input ended early.

    Args:
        first: Byte immediately after the `%`.
        second: Byte after that.

    Returns:
        Tuple of (decoded byte value, True if neither digit is a lowercase letter).

    Raises:
        PercentDecodeError: If a digit is missing or is not a hex digit.
    """
    if first is None or second is None:
        raise PercentDecodeError("truncated percent encoding")

    high = HEX_VALUE_MAP[first]
    low = HEX_VALUE_MAP[second]
    if high is None or low is None:
        raise PercentDecodeError(f"invalid hex digits: {bytes((first, second))!r}")

    canonical = not (0x61 <= first <= 0x66 or 0x61 <= second <= 0x66)
    return high * 16 + low, canonical
