"""Character set functionality: byte classification and percent decoding."""

from uriquery.core.charset.models import (
    QUERY_CHAR_MAP,
    UNRESERVED_CHAR_MAP,
    ByteClass,
)
from uriquery.core.charset.operations import (
    PercentDecodeError,
    classify_byte,
    decode_percent,
    is_unreserved,
)

__all__ = [
    # Models
    "ByteClass",
    "QUERY_CHAR_MAP",
    "UNRESERVED_CHAR_MAP",
    # Operations
    "PercentDecodeError",
    "classify_byte",
    "decode_percent",
    "is_unreserved",
]
