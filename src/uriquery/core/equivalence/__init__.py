"""Equivalence functionality: percent-encoding-transparent equality and hashing."""

from uriquery.core.equivalence.models import Hasher
from uriquery.core.equivalence.operations import (
    iter_logical_units,
    percent_encoded_equality,
    percent_encoded_hash,
)

__all__ = [
    # Models
    "Hasher",
    # Operations
    "iter_logical_units",
    "percent_encoded_equality",
    "percent_encoded_hash",
]
