"""Query-scoped result types. Built per request, never cached."""

from dataclasses import dataclass, field
from typing import Any

from ..data.types import Entry


@dataclass
class ScoredMatch:
    """An entry ranked against a query. Lower score is more relevant."""

    entry: Entry
    category: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = self.entry.to_summary()
        result["category"] = self.category
        result["score"] = self.score
        return result


@dataclass
class ListPage:
    """One page of a category listing."""

    category: str
    entries: list[Entry]
    total: int
    offset: int
    limit: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "category": self.category,
            "entries": [e.to_summary() for e in self.entries],
            "total": self.total,
            "offset": self.offset,
            "count": len(self.entries),
            "has_more": self.has_more,
        }
        if self.has_more:
            result["next_offset"] = self.offset + self.limit
        return result


@dataclass
class Suggestion:
    """A near miss offered when a lookup fails."""

    entry: Entry
    distance: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.entry.display_name,
            "id": self.entry.id,
            "index": self.entry.sequence_index,
            "distance": self.distance,
        }


@dataclass
class LookupResult:
    """Outcome of a single-record lookup."""

    query: str
    category: str
    entry: Entry | None = None
    suggestions: list[Suggestion] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.entry is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.entry is not None:
            return {"found": True, "category": self.category, "entry": self.entry.to_dict()}
        return {
            "found": False,
            "category": self.category,
            "query": self.query,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass
class CategoryStats:
    """Entry counts for one category."""

    category: str
    total: int
    released: int
    unreleased: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category,
            "total": self.total,
            "released": self.released,
            "unreleased": self.unreleased,
        }
