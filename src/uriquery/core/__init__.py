"""Core functionalities: stateless byte-level primitives for the query component.

Architecture Note:
    core/ contains pure functions and value types with no configuration.
    For configurable parsing, see parsing/ and config/.
"""

from uriquery.core.charset import (
    ByteClass,
    PercentDecodeError,
    classify_byte,
    decode_percent,
    is_unreserved,
)
from uriquery.core.equivalence import (
    Hasher,
    iter_logical_units,
    percent_encoded_equality,
    percent_encoded_hash,
)
from uriquery.core.query import (
    BorrowedContent,
    InvalidQueryError,
    InvalidQueryKind,
    OwnedContent,
    Query,
    QueryContent,
    normalize_in_place,
    parse_query,
    parse_query_exact,
    scan_query,
)

__all__ = [
    # Charset
    "ByteClass",
    "PercentDecodeError",
    "classify_byte",
    "decode_percent",
    "is_unreserved",
    # Equivalence
    "Hasher",
    "iter_logical_units",
    "percent_encoded_equality",
    "percent_encoded_hash",
    # Query
    "Query",
    "QueryContent",
    "BorrowedContent",
    "OwnedContent",
    "InvalidQueryError",
    "InvalidQueryKind",
    "scan_query",
    "parse_query",
    "parse_query_exact",
    "normalize_in_place",
]
