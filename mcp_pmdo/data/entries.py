"""Dispatch a category to the extractor matching its distribution mode."""

from typing import Callable

from ..config import ProjectPaths
from .categories import Category, DistributionMode
from .snapshot import extract_snapshot_entries
from .source import extract_source_entries
from .types import Entry

Extractor = Callable[[Category, ProjectPaths], list[Entry]]

EXTRACTORS: dict[DistributionMode, Extractor] = {
    DistributionMode.SOURCE: extract_source_entries,
    DistributionMode.SNAPSHOT: extract_snapshot_entries,
}


def get_entries(category: Category, paths: ProjectPaths) -> list[Entry]:
    """Read the category's entries fresh from disk."""
    return EXTRACTORS[category.mode](category, paths)
