"""Query functionality: the query component model, scanner and normalizer."""

from uriquery.core.query.models import (
    BorrowedContent,
    InvalidQueryError,
    InvalidQueryKind,
    OwnedContent,
    Query,
    QueryContent,
)
from uriquery.core.query.operations import (
    normalize_in_place,
    parse_query,
    parse_query_exact,
    scan_query,
)

__all__ = [
    # Models
    "Query",
    "QueryContent",
    "BorrowedContent",
    "OwnedContent",
    "InvalidQueryError",
    "InvalidQueryKind",
    # Operations
    "scan_query",
    "parse_query",
    "parse_query_exact",
    "normalize_in_place",
]
