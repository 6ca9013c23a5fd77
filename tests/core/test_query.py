"""Tests for the query component: scanning, normalization and equivalence.

Critical Invariants:
- Parsed content is the exact input prefix, never rewritten
- `is_normalized` is never a false True
- Normalization is idempotent and never grows the content
- Equal queries hash equal
- Normalizing a borrowed query never touches the caller's buffer
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from uriquery import BorrowedContent, InvalidQueryError, InvalidQueryKind, OwnedContent, Query
from uriquery.core.query import QueryContent
from uriquery.core.charset.models import QUERY_LITERAL_CHARS
from uriquery.core.query import normalize_in_place, parse_query, parse_query_exact


@st.composite
def percent_triplet(draw):
    value = draw(st.integers(min_value=0, max_value=255))
    hex_digits = f"{value:02X}"
    if draw(st.booleans()):
        hex_digits = hex_digits.lower()
    return "%" + hex_digits


query_text = st.lists(
    st.one_of(st.sampled_from(list(QUERY_LITERAL_CHARS)), percent_triplet()),
    max_size=30,
).map("".join)


# Scanning


def test_prefix_stops_at_fragment():
    query, rest = parse_query("a=b#frag")

    assert query.as_str() == "a=b"
    assert rest == "#frag"


def test_prefix_without_fragment_has_empty_remainder():
    query, rest = parse_query(b"a=b&c=d")

    assert query.as_str() == "a=b&c=d"
    assert rest == b""


def test_prefix_counts_triplets_in_consumed_length():
    """The query ends after the whole triplet, not after its logical position."""
    query, rest = parse_query("%41%2f=x#f")

    assert query.as_str() == "%41%2f=x"
    assert rest == "#f"


def test_strict_parse_rejects_fragment():
    with pytest.raises(InvalidQueryError) as exc_info:
        Query.parse("a=b#frag")

    assert exc_info.value.kind is InvalidQueryKind.EXPECTED_EOF
    assert exc_info.value.position == 3
    assert "expected EOF" in str(exc_info.value)


def test_empty_query_is_valid():
    query = Query.parse("")

    assert query.as_str() == ""
    assert query.is_normalized
    assert len(query) == 0


@pytest.mark.parametrize(
    ("text", "position"),
    [("a%ZZb", 1), ("a%2", 1), ("%", 0), ("ab%g0", 2)],
)
def test_invalid_percent_encoding(text, position):
    with pytest.raises(InvalidQueryError) as exc_info:
        parse_query(text)

    assert exc_info.value.kind is InvalidQueryKind.INVALID_PERCENT_ENCODING
    assert exc_info.value.position == position


@pytest.mark.parametrize(("text", "position"), [("a<b", 1), ("a b", 1), ("[x]", 0), ("café", 3)])
def test_invalid_character(text, position):
    with pytest.raises(InvalidQueryError) as exc_info:
        parse_query(text)

    assert exc_info.value.kind is InvalidQueryKind.INVALID_CHARACTER
    assert exc_info.value.position == position


def test_invalid_character_after_fragment_is_not_scanned():
    """Bytes after `#` belong to the fragment parser."""
    query, rest = parse_query("a=b#<not ours>")

    assert query.as_str() == "a=b"
    assert rest == "#<not ours>"


def test_text_and_bytes_parse_identically():
    assert parse_query_exact("a=%7e").as_bytes() == parse_query_exact(b"a=%7e").as_bytes()


def test_normalization_flag_from_scan():
    assert Query.parse("a=b&c=%2F").is_normalized
    assert not Query.parse("a=%2f").is_normalized, "lowercase hex digits"
    assert not Query.parse("a=%7E").is_normalized, "encoded unreserved character"


@given(text=query_text)
def test_round_trip_preserves_text(text):
    """PROPERTY: Parsing never rewrites the original representation."""
    query = Query.parse(text)

    assert query.as_str() == text
    assert bytes(query) == text.encode("ascii")


# Normalization


def test_normalize_decodes_unreserved():
    query = Query.parse("a%7Eb")
    query.normalize()

    assert query.as_str() == "a~b"
    assert query.is_normalized


def test_normalize_uppercases_reserved():
    query = Query.parse("a%2fb")
    query.normalize()

    assert query.as_str() == "a%2Fb"


def test_normalize_canonical_query_is_noop():
    query = Query.parse("abc")

    assert query.is_normalized
    query.normalize()
    assert query.as_str() == "abc"
    assert not query.is_owned, "no copy needed when already canonical"


def test_normalize_in_place_compacts_buffer():
    buffer = bytearray(b"%41%2f%7e-%3d")
    normalize_in_place(buffer)

    assert buffer == bytearray(b"A%2F~-%3D")


def test_normalize_borrowed_leaves_caller_buffer_untouched():
    source = b"a%7Eb#frag"
    query, rest = parse_query(memoryview(source))

    assert not query.is_owned
    query.normalize()

    assert query.is_owned
    assert query.as_str() == "a~b"
    assert source == b"a%7Eb#frag"
    assert bytes(rest) == b"#frag"


def test_normalized_returns_copy(encoded_query):
    result = encoded_query.normalized()

    assert result.as_str() == "a~b%2Fc"
    assert encoded_query.as_str() == "a%7Eb%2fc"
    assert not encoded_query.is_normalized


@given(text=query_text)
def test_normalization_idempotent(text):
    """PROPERTY: normalize(normalize(q)) == normalize(q)."""
    once = Query.parse(text).normalized()
    twice = Query.parse(once.as_str())
    twice.normalize()

    assert once.is_normalized
    assert twice.as_str() == once.as_str()


@given(text=query_text)
def test_normalization_never_grows(text):
    query = Query.parse(text)
    query.normalize()

    assert len(query) <= len(text)


@given(text=query_text)
def test_normalized_output_is_valid_canonical_query(text):
    """PROPERTY: In-place rewriting yields valid ASCII that rescans as canonical."""
    normalized = Query.parse(text).normalized().as_str()
    rescanned = Query.parse(normalized)

    assert rescanned.is_normalized


@given(text=query_text)
def test_normalized_flag_is_accurate(text):
    """PROPERTY: is_normalized is True exactly when normalizing changes nothing."""
    query = Query.parse(text)

    assert query.is_normalized == (query.normalized().as_str() == text)


# Equivalence


def test_equality_is_case_sensitive():
    assert Query.parse("Query") != Query.parse("query")


def test_equality_ignores_percent_encoding():
    assert Query.parse("que%72y") == Query.parse("query")
    assert Query.parse("a%2F") == Query.parse("a%2f")


def test_compare_with_text_and_bytes():
    query = Query.parse("que%72y")

    assert query == "query"
    assert query == b"query"
    assert query == bytearray(b"qu%65ry")
    assert query != "50%"
    assert query != 42


def test_equal_queries_hash_equal():
    queries = {Query.parse("que%72y"), Query.parse("query"), Query.parse("%71uery")}

    assert len(queries) == 1


def test_hash_stable_across_normalize(encoded_query):
    before = hash(encoded_query)
    encoded_query.normalize()

    assert hash(encoded_query) == before


@given(a=query_text, b=query_text)
def test_equivalence_preserved_by_normalization(a, b):
    """PROPERTY: equivalent(a, b) == equivalent(normalize(a), normalize(b))."""
    qa, qb = Query.parse(a), Query.parse(b)

    assert (qa == qb) == (qa.normalized() == qb.normalized())


@given(text=query_text)
def test_normalized_equals_original_and_hashes_equal(text):
    """PROPERTY: equal implies hash equal, across representations."""
    query = Query.parse(text)
    normalized = query.normalized()

    assert query == normalized
    assert hash(query) == hash(normalized)


# Ownership


def test_into_owned_detaches_from_source():
    source = bytearray(b"a=b")
    query = parse_query_exact(source).into_owned()

    assert query.is_owned
    source[0] = ord("z")
    assert query.as_str() == "a=b"


def test_into_owned_preserves_flag(encoded_query, canonical_query):
    assert not encoded_query.into_owned().is_normalized
    assert canonical_query.into_owned().is_normalized


def test_accessors(canonical_query):
    assert str(canonical_query) == "key=value&path=%2F"
    assert repr(canonical_query) == "Query('key=value&path=%2F')"
    assert len(canonical_query) == len("key=value&path=%2F")


def test_writable_buffer_is_copied_at_parse():
    """CRITICAL: Mutating the source after parsing cannot corrupt a query.

    Why: a live view would let a raw `#` or a broken escape into validated
    content, change the hash of a query stored in a set, and make
    normalize() fail.
    """
    source = bytearray(b"a%41b")
    query = parse_query_exact(source)
    before = hash(query)

    assert query.is_owned
    source[2] = ord("Z")
    source[4] = ord("#")

    assert query.as_str() == "a%41b"
    assert hash(query) == before
    query.normalize()
    assert query.as_str() == "aAb"


def test_prefix_parse_of_writable_buffer_is_owned():
    source = bytearray(b"a=%7e#frag")
    query, rest = parse_query(source)

    assert query.is_owned
    source[0] = ord("z")
    assert query.as_str() == "a=%7e"
    assert bytes(rest) == b"#frag"


def test_bytes_input_is_borrowed():
    query, _ = parse_query(b"a=b#frag")

    assert not query.is_owned


def test_non_contiguous_view_is_accepted():
    source = memoryview(b"aXbX=XcX")[::2]
    query = parse_query_exact(source)

    assert query.as_str() == "ab=c"


def test_content_variants_satisfy_protocol():
    assert isinstance(BorrowedContent(memoryview(b"a")), QueryContent)
    assert isinstance(OwnedContent(bytearray(b"a")), QueryContent)


@given(text=query_text)
def test_hash_independent_of_input_type(text):
    """PROPERTY: Queries equal across str, bytes and bytearray sources hash equal."""
    from_text = Query.parse(text)
    from_bytes = Query.parse(text.encode("ascii"))
    from_buffer = Query.parse(bytearray(text.encode("ascii")))

    assert from_text == from_bytes == from_buffer
    assert hash(from_text) == hash(from_bytes) == hash(from_buffer)
