"""
PMDO search module - ranked fuzzy search and single-record lookup.
"""

from .fuzzy import levenshtein
from .types import CategoryStats, ListPage, LookupResult, ScoredMatch, Suggestion
from .engine import (
    score_entry,
    search,
    list_by_category,
    lookup_entry,
    category_stats,
)

__all__ = [
    "levenshtein",
    # Types
    "CategoryStats",
    "ListPage",
    "LookupResult",
    "ScoredMatch",
    "Suggestion",
    # Engine
    "score_entry",
    "search",
    "list_by_category",
    "lookup_entry",
    "category_stats",
]
