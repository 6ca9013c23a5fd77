"""Core type definitions for uriquery."""

from typing import TypeAlias

ByteInput: TypeAlias = bytes | bytearray | memoryview
"""Any bytes-like buffer accepted by the scanner and equivalence functions."""

QueryInput: TypeAlias = str | ByteInput
"""Text or raw bytes. Both are scanned identically since valid content is ASCII."""
