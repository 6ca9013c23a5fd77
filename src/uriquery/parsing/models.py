"""Parser models and configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uriquery.config import QuerySettings


class NonCanonicalQueryWarning(UserWarning):
    """Emitted when a parsed query is not in canonical form."""

    pass


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Configuration for QueryParser behavior.

    Passed to the parser at construction, or built from environment settings.
    """

    strict: bool = True
    """Require the whole input to be one query. False allows a `#fragment` remainder."""

    normalize: bool = False
    """Normalize every parsed query. Default: keep the original text."""

    warn_on_unnormalized: bool = False
    """Warn with NonCanonicalQueryWarning when a query is not canonical."""

    @classmethod
    def from_settings(cls, settings: QuerySettings) -> ParserConfig:
        """Build a config from environment-backed QuerySettings."""
        return cls(
            strict=settings.strict,
            normalize=settings.normalize,
            warn_on_unnormalized=settings.warn_on_unnormalized,
        )
