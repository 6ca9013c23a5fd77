"""Percent-encoding-transparent equality and hashing.

Both functions walk the logical byte stream of their input: every valid `%XX`
triplet contributes its single decoded byte, every other byte contributes
itself. Two inputs are equivalent iff their logical streams are identical,
and equivalent inputs feed identical streams into a hasher.

Usage:
    percent_encoded_equality(b"que%72y", b"query")  # True
    percent_encoded_equality(b"a%2F", b"a%2f")      # True
    percent_encoded_equality(b"Query", b"query")    # False

    digest = hashlib.blake2b()
    percent_encoded_hash(b"que%72y", digest)
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest

from uriquery.core.charset import PercentDecodeError, decode_percent
from uriquery.core.equivalence.models import Hasher
from uriquery.core.types import ByteInput

_PERCENT = 0x25

# One bytes object per value so hashing never allocates per unit
_UNIT_BYTES = tuple(bytes((value,)) for value in range(256))


def _fold_case(value: int) -> int:
    if 0x41 <= value <= 0x5A:
        return value + 0x20
    return value


def iter_logical_units(data: ByteInput, case_sensitive: bool = True) -> Iterator[int]:
    """Yield the decoded byte stream of `data` one logical unit at a time.

    A `%` that is not followed by two hex digits is yielded as a literal byte,
    so unvalidated input never raises here.

    Args:
        data: Raw bytes, possibly containing percent-encoded triplets.
        case_sensitive: If False, ASCII letters are lowercased after decoding.

    Yields:
        One byte value per literal byte or per percent-encoded triplet.
    """
    index = 0
    length = len(data)

    while index < length:
        byte = data[index]

        if byte == _PERCENT and index + 2 < length:
            try:
                value, _ = decode_percent(data[index + 1], data[index + 2])
            except PercentDecodeError:
                pass
            else:
                yield value if case_sensitive else _fold_case(value)
                index += 3
                continue

        yield byte if case_sensitive else _fold_case(byte)
        index += 1


def percent_encoded_equality(left: ByteInput, right: ByteInput, case_sensitive: bool = True) -> bool:
    """Check if two byte sequences decode to the same logical content.

    Hex digit case inside a triplet never matters. Literal case matters
    unless `case_sensitive` is False.

    Args:
        left: First byte sequence.
        right: Second byte sequence.
        case_sensitive: Whether literal ASCII letters must match exactly.

    Returns:
        True if both sides yield identical logical units.
    """
    if left == right:
        return True

    # zip_longest pads the shorter side with None, which never equals a byte
    return all(
        a == b
        for a, b in zip_longest(
            iter_logical_units(left, case_sensitive),
            iter_logical_units(right, case_sensitive),
        )
    )


def percent_encoded_hash(data: ByteInput, hasher: Hasher, case_sensitive: bool = True) -> None:
    """Feed the logical byte stream of `data` into `hasher`.

    Equivalent inputs (per `percent_encoded_equality` with the same
    `case_sensitive`) always feed identical streams.
    """
    for unit in iter_logical_units(data, case_sensitive):
        hasher.update(_UNIT_BYTES[unit])
