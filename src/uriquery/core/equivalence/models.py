"""Equivalence models: the hash accumulator interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Hasher(Protocol):
    """Streaming hash accumulator. Any `hashlib` object satisfies this."""

    def update(self, data: bytes, /) -> None:
        """Feed more bytes into the accumulator."""
        ...
