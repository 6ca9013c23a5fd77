"""uriquery: validation, normalization and comparison of URI query components.

Usage:
    from uriquery import Query

    query = Query.parse("que%72y")
    query == "query"        # True, percent-encoding is transparent
    query == "Query"        # False, content is case-sensitive

    query, rest = Query.parse_prefix("a=b#frag")
    rest                    # "#frag"

    query = Query.parse("a%7Eb%2f")
    query.normalize()
    query.as_str()          # "a~b%2F"
"""

__version__ = "0.1.0"

# Core primitives
from uriquery.core import (
    BorrowedContent,
    ByteClass,
    Hasher,
    InvalidQueryError,
    InvalidQueryKind,
    OwnedContent,
    PercentDecodeError,
    Query,
    QueryContent,
    iter_logical_units,
    parse_query,
    parse_query_exact,
    percent_encoded_equality,
    percent_encoded_hash,
)

# Parsing
from uriquery.parsing import (
    NonCanonicalQueryWarning,
    ParserConfig,
    QueryParser,
)

__all__ = [
    # Version
    "__version__",
    # Query
    "Query",
    "QueryContent",
    "BorrowedContent",
    "OwnedContent",
    "InvalidQueryError",
    "InvalidQueryKind",
    "parse_query",
    "parse_query_exact",
    # Charset
    "ByteClass",
    "PercentDecodeError",
    # Equivalence
    "Hasher",
    "iter_logical_units",
    "percent_encoded_equality",
    "percent_encoded_hash",
    # Parsing
    "QueryParser",
    "ParserConfig",
    "NonCanonicalQueryWarning",
]
