"""
PMDO data module - entry extraction from generator sources and snapshots.

Two extractors produce the same Entry shape:
- source: replays the generator's branch ladder line by line
- snapshot: reads dumped JSON indexes for categories shipped as finished data
"""

from .types import Entry
from .categories import (
    CATEGORIES,
    CATEGORY_NAMES,
    Category,
    DistributionMode,
    get_category,
)
from .source import (
    SourcePatterns,
    derive_name,
    slugify,
    parse_source_text,
    extract_source_entries,
)
from .snapshot import parse_snapshot_index, extract_snapshot_entries
from .entries import get_entries

__all__ = [
    # Types
    "Entry",
    # Categories
    "CATEGORIES",
    "CATEGORY_NAMES",
    "Category",
    "DistributionMode",
    "get_category",
    # Source extraction
    "SourcePatterns",
    "derive_name",
    "slugify",
    "parse_source_text",
    "extract_source_entries",
    # Snapshot extraction
    "parse_snapshot_index",
    "extract_snapshot_entries",
    # Dispatch
    "get_entries",
]
