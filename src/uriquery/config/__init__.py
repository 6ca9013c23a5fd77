"""Configuration module using Pydantic Settings.

Provides typed parser configuration with environment variable support.

Usage:
    from uriquery.config import QuerySettings

    settings = QuerySettings(strict=False)
"""

from uriquery.config.settings import QuerySettings

__all__ = [
    "QuerySettings",
]
