"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from uriquery import Query


@pytest.fixture
def encoded_query():
    """Query with one decodable unreserved triplet and one lowercase reserved triplet."""
    return Query.parse("a%7Eb%2fc")


@pytest.fixture
def canonical_query():
    """Query already in canonical form."""
    return Query.parse("key=value&path=%2F")
