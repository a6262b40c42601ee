"""Utilities package"""

from .text import ContextualSynonymTable, QueryMatcher, filter_catalog, matches

__all__ = [
    "ContextualSynonymTable",
    "QueryMatcher",
    "filter_catalog",
    "matches",
]
