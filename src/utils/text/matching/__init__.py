"""Matching package."""

from .contextual import (
    DEFAULT_CONTEXTUAL_KEYWORDS,
    ContextualSynonymTable,
    QueryMatcher,
    filter_catalog,
    matches,
)

__all__ = [
    "DEFAULT_CONTEXTUAL_KEYWORDS",
    "ContextualSynonymTable",
    "QueryMatcher",
    "filter_catalog",
    "matches",
]
