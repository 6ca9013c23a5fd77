"""Query component models.

See RFC 3986, Section 3.4. Query string parameters are not interpreted; a
Query only guarantees that its content is a syntactically valid query.

Usage:
    query = Query.parse("que%72y")
    query == "query"      # True, percent-encoding is transparent
    query == "Query"      # False, content is case-sensitive
    query.as_str()        # "que%72y", the original text is preserved

    query.normalize()
    query.as_str()        # "query"
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from uriquery.core.equivalence import percent_encoded_equality, percent_encoded_hash

if TYPE_CHECKING:
    from uriquery.core.types import QueryInput


class InvalidQueryKind(Enum):
    """Why a query failed to parse."""

    EXPECTED_EOF = "expected EOF"
    """Input continued after the query (e.g. `"my=query#fragment"` in strict mode)."""

    INVALID_CHARACTER = "invalid query character"
    """A byte outside the query character set was found."""

    INVALID_PERCENT_ENCODING = "invalid query percent encoding"
    """A `%` was not followed by two hex digits (e.g. `"%ZZ"`)."""


class InvalidQueryError(ValueError):
    """Raised when input is not a valid query component.

    Attributes:
        kind: Which rule the input broke.
        position: Byte offset where scanning stopped.
    """

    def __init__(self, kind: InvalidQueryKind, position: int):
        super().__init__(f"{kind.value} at position {position}")
        self.kind = kind
        self.position = position


@runtime_checkable
class QueryContent(Protocol):
    """Storage for query bytes. Either a borrowed view or an owned buffer."""

    @property
    def data(self) -> memoryview | bytearray:
        """Underlying buffer, read without copying."""
        ...

    @property
    def is_owned(self) -> bool:
        """True if the buffer is private and may be mutated."""
        ...

    def to_owned(self) -> OwnedContent:
        """Copy into a new private buffer."""
        ...


@dataclass(frozen=True, slots=True)
class BorrowedContent:
    """Zero-copy view into an immutable `bytes` buffer owned by the caller.

    Parsing only borrows `bytes`; writable buffers go straight to OwnedContent.
    """

    view: memoryview

    @property
    def data(self) -> memoryview:
        return self.view

    @property
    def is_owned(self) -> bool:
        return False

    def to_owned(self) -> OwnedContent:
        return OwnedContent(bytearray(self.view))


@dataclass(slots=True)
class OwnedContent:
    """Private mutable buffer, required for in-place normalization."""

    buffer: bytearray

    @property
    def data(self) -> bytearray:
        return self.buffer

    @property
    def is_owned(self) -> bool:
        return True

    def to_owned(self) -> OwnedContent:
        return OwnedContent(bytearray(self.buffer))


class Query:
    """The query component of a URI.

    The query is case-sensitive, and percent-encoding plays no role in equality:
    `"query"` and `"que%72y"` are the same query. Both `__eq__` and `__hash__`
    reflect this.

    Equality ignoring percent-encoding does not mean the query is normalized.
    The original text is preserved as-is until `normalize()` is called.

    Build instances with `Query.parse()` or `Query.parse_prefix()`; the
    constructor trusts that `content` was already validated.

    Args:
        content: Validated query bytes.
        normalized: True only if `content` is already in canonical form.
    """

    __slots__ = ("_content", "_normalized")

    def __init__(self, content: QueryContent, normalized: bool):
        self._content = content
        self._normalized = normalized

    @classmethod
    def parse(cls, value: QueryInput) -> Query:
        """Parse input that must be exactly one query, with nothing left over.

        Raises:
            InvalidQueryError: On invalid input, or EXPECTED_EOF if a `#` follows.
        """
        from uriquery.core.query.operations import parse_query_exact

        return parse_query_exact(value)

    @classmethod
    def parse_prefix(cls, value: QueryInput) -> tuple[Query, QueryInput]:
        """Parse a query from the start of `value`, returning it and the remainder."""
        from uriquery.core.query.operations import parse_query

        return parse_query(value)

    @property
    def is_normalized(self) -> bool:
        return self._normalized

    @property
    def is_owned(self) -> bool:
        return self._content.is_owned

    def as_str(self) -> str:
        """Query text exactly as stored."""
        return str(self._content.data, "ascii")

    def as_bytes(self) -> bytes:
        """Copy of the stored bytes."""
        return bytes(self._content.data)

    def into_owned(self) -> Query:
        """Return an equal query backed by its own private buffer.

        Unlike `copy.copy`, the result no longer references the buffer this
        query was parsed from.
        """
        return Query(self._content.to_owned(), self._normalized)

    def normalize(self) -> None:
        """Rewrite the content into canonical form, in place.

        Percent-encoded unreserved characters are decoded and remaining
        triplets get uppercase hex digits. A borrowed view is first copied
        into an owned buffer; the caller's buffer is never modified.
        """
        if self._normalized:
            return

        from uriquery.core.query.operations import normalize_in_place

        if not isinstance(self._content, OwnedContent):
            self._content = self._content.to_owned()

        normalize_in_place(self._content.buffer)
        self._normalized = True

    def normalized(self) -> Query:
        """Return a normalized owned copy, leaving this query untouched."""
        query = self.into_owned()
        query.normalize()
        return query

    def __len__(self) -> int:
        return len(self._content.data)

    def __str__(self) -> str:
        return self.as_str()

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __repr__(self) -> str:
        return f"Query({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Query):
            other_data: memoryview | bytearray | bytes = other._content.data
        elif isinstance(other, str):
            other_data = other.encode("utf-8")
        elif isinstance(other, bytes | bytearray | memoryview):
            other_data = other
        else:
            return NotImplemented
        return percent_encoded_equality(self._content.data, other_data, case_sensitive=True)

    def __hash__(self) -> int:
        """Hash of the decoded content.

        Consistent with `==` between Query values only. A Query may equal a
        `str` or `bytes` value without sharing its hash, so do not mix them as
        keys of one dict or set.
        """
        digest = hashlib.blake2b(digest_size=8)
        percent_encoded_hash(self._content.data, digest, case_sensitive=True)
        return int.from_bytes(digest.digest(), "little", signed=True)
