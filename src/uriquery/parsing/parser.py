"""Configurable query parser.

Usage:
    parser = QueryParser(ParserConfig(strict=False, normalize=True))
    query, rest = parser.parse("a=%7Eb#frag")
    query.as_str()  # "a=~b"
    rest            # "#frag"
"""

from __future__ import annotations

import warnings

from uriquery.core.query import Query, parse_query, parse_query_exact
from uriquery.core.types import QueryInput
from uriquery.parsing.models import NonCanonicalQueryWarning, ParserConfig


class QueryParser:
    """Parses query components according to a ParserConfig.

    Args:
        config: Parser configuration. Defaults to strict, non-normalizing.
    """

    def __init__(self, config: ParserConfig | None = None):
        self._config = config or ParserConfig()

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, value: QueryInput) -> tuple[Query, QueryInput]:
        """Parse a query and return it with the unconsumed remainder.

        In strict mode the remainder is always empty.

        Raises:
            InvalidQueryError: If the input is not a valid query.
        """
        if self._config.strict:
            query = parse_query_exact(value)
            rest: QueryInput = value[:0] if isinstance(value, str | bytes) else memoryview(b"")
        else:
            query, rest = parse_query(value)
        return self._finish(query), rest

    def parse_query(self, value: QueryInput) -> Query:
        """Parse input that must be exactly one query, ignoring `strict`."""
        return self._finish(parse_query_exact(value))

    def _finish(self, query: Query) -> Query:
        if query.is_normalized:
            return query
        if self._config.normalize:
            query.normalize()
        elif self._config.warn_on_unnormalized:
            warnings.warn(
                f"Query {query.as_str()!r} is not in canonical form",
                NonCanonicalQueryWarning,
                stacklevel=3,
            )
        return query
