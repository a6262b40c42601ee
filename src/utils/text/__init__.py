"""Text utilities."""

from .matching import ContextualSynonymTable, QueryMatcher, filter_catalog, matches

__all__ = [
    "ContextualSynonymTable",
    "QueryMatcher",
    "filter_catalog",
    "matches",
]
