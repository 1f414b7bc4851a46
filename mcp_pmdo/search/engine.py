"""
Category-aware fuzzy search over extracted entries.

Scoring is tiered; the first tier that matches wins and lower is better:

    0           query equals the name or id
    10          name or id starts with the query
    20          name or id contains the query
    50          description contains the query
    100 + d     edit distance d between query and name, if d <= 3

All comparisons are case-insensitive. Anything else is excluded.
"""

import logging

from ..config import ProjectPaths
from ..data.categories import CATEGORIES, Category, get_category
from ..data.entries import get_entries
from ..data.types import Entry
from .fuzzy import levenshtein
from .types import CategoryStats, ListPage, LookupResult, ScoredMatch, Suggestion

logger = logging.getLogger(__name__)

SCORE_EXACT = 0
SCORE_PREFIX = 10
SCORE_SUBSTRING = 20
SCORE_DESCRIPTION = 50
SCORE_FUZZY_BASE = 100

MAX_EDIT_DISTANCE = 3
MAX_SUGGESTIONS = 5


def score_entry(entry: Entry, query: str) -> int | None:
    """Score one entry against a query.

    Args:
        entry: Entry to score
        query: Query text (any case)

    Returns:
        Tier score, or None if the entry does not match at all
    """
    q = query.lower()
    name = entry.display_name.lower()
    entry_id = entry.id.lower()

    if q == name or q == entry_id:
        return SCORE_EXACT
    if name.startswith(q) or entry_id.startswith(q):
        return SCORE_PREFIX
    if q in name or q in entry_id:
        return SCORE_SUBSTRING
    if q in entry.description.lower():
        return SCORE_DESCRIPTION

    distance = levenshtein(q, name)
    if distance <= MAX_EDIT_DISTANCE:
        return SCORE_FUZZY_BASE + distance
    return None


def _resolve(categories: list[str] | None) -> list[Category]:
    if not categories:
        return list(CATEGORIES.values())
    return [get_category(name) for name in categories]


def search(
    query: str,
    paths: ProjectPaths,
    categories: list[str] | None = None,
    limit: int = 20,
    include_unreleased: bool = False,
) -> list[ScoredMatch]:
    """Rank entries across categories by relevance to a query.

    Args:
        query: Search text
        paths: Project locations
        categories: Category names to search (default: all)
        limit: Maximum number of matches returned
        include_unreleased: Keep entries marked as work in progress

    Returns:
        Matches in ascending score order; ties keep category and entry order

    Raises:
        UnknownCategoryError: If a category name is not registered
    """
    matches: list[ScoredMatch] = []

    for category in _resolve(categories):
        for entry in get_entries(category, paths):
            if entry.is_unreleased and not include_unreleased:
                continue
            score = score_entry(entry, query)
            if score is None:
                continue
            matches.append(ScoredMatch(entry=entry, category=category.name, score=score))

    matches.sort(key=lambda m: m.score)
    logger.debug(f"search {query!r}: {len(matches)} matches")
    return matches[: max(limit, 0)]


def list_by_category(
    category: str,
    paths: ProjectPaths,
    limit: int = 50,
    offset: int = 0,
    include_unreleased: bool = False,
) -> ListPage:
    """Page through a category's entries in extraction order."""
    cat = get_category(category)
    entries = get_entries(cat, paths)
    if not include_unreleased:
        entries = [e for e in entries if not e.is_unreleased]

    offset = max(offset, 0)
    limit = max(limit, 0)
    return ListPage(
        category=cat.name,
        entries=entries[offset : offset + limit],
        total=len(entries),
        offset=offset,
        limit=limit,
    )


def lookup_entry(category: str, query: str, paths: ProjectPaths) -> LookupResult:
    """Find one entry by id, name or index.

    On a miss, up to five entries whose names are within edit distance 3 of
    the query are offered as suggestions, nearest first.
    """
    cat = get_category(category)
    entries = get_entries(cat, paths)
    key = query.strip()
    key_lower = key.lower()

    for entry in entries:
        if entry.id.lower() == key_lower or entry.display_name.lower() == key_lower or str(entry.sequence_index) == key:
            return LookupResult(query=query, category=cat.name, entry=entry)

    suggestions = [Suggestion(entry=e, distance=levenshtein(key_lower, e.display_name.lower())) for e in entries]
    suggestions = [s for s in suggestions if s.distance <= MAX_EDIT_DISTANCE]
    suggestions.sort(key=lambda s: s.distance)
    return LookupResult(query=query, category=cat.name, suggestions=suggestions[:MAX_SUGGESTIONS])


def category_stats(paths: ProjectPaths, categories: list[str] | None = None) -> list[CategoryStats]:
    """Count released and unreleased entries per category."""
    stats: list[CategoryStats] = []
    for cat in _resolve(categories):
        entries = get_entries(cat, paths)
        unreleased = sum(1 for e in entries if e.is_unreleased)
        stats.append(
            CategoryStats(
                category=cat.name,
                total=len(entries),
                released=len(entries) - unreleased,
                unreleased=unreleased,
            )
        )
    return stats
