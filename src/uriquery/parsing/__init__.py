"""Parsing functionality: configurable query parser."""

from uriquery.parsing.models import NonCanonicalQueryWarning, ParserConfig
from uriquery.parsing.parser import QueryParser

__all__ = [
    "QueryParser",
    "ParserConfig",
    "NonCanonicalQueryWarning",
]
