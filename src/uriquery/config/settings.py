"""Configuration settings using Pydantic Settings.

Provides typed parser configuration with environment variable support.

Usage:
    from uriquery.config import QuerySettings
    from uriquery.parsing import ParserConfig, QueryParser

    # Load from environment variables (URIQUERY_*)
    settings = QuerySettings()

    # Or override with explicit values
    settings = QuerySettings(normalize=True)

    parser = QueryParser(ParserConfig.from_settings(settings))
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install uriquery[config]"
    ) from e


class QuerySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for query parsing.

    Attributes:
        strict: Reject input that continues past the query (e.g. `#fragment`).
        normalize: Normalize every parsed query.
        warn_on_unnormalized: Warn when a parsed query is not canonical.

    Environment Variables:
        URIQUERY_STRICT
        URIQUERY_NORMALIZE
        URIQUERY_WARN_ON_UNNORMALIZED
    """

    model_config = SettingsConfigDict(
        env_prefix="URIQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = True
    normalize: bool = False
    warn_on_unnormalized: bool = False
