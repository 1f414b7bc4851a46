"""
Entry data types shared by the source and snapshot extractors.

Both extractors produce the same Entry shape so the query engine never needs
to know where a record came from.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class Entry:
    """One piece of game content (a skill, an item, a monster, ...)."""

    sequence_index: int
    id: str
    display_name: str
    raw_name: str
    category: str
    description: str = ""
    sprite: str | None = None
    price: int | None = None
    is_unreleased: bool = False
    source_file: str | None = None
    source_line: int | None = None

    @property
    def source_location(self) -> str | None:
        """File and line for source-derived entries, None for snapshots."""
        if self.source_file is None:
            return None
        if self.source_line is None:
            return self.source_file
        return f"{self.source_file}:{self.source_line}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "index": self.sequence_index,
            "id": self.id,
            "name": self.display_name,
            "raw_name": self.raw_name,
            "category": self.category,
            "description": self.description,
            "is_unreleased": self.is_unreleased,
        }
        if self.sprite is not None:
            result["sprite"] = self.sprite
        if self.price is not None:
            result["price"] = self.price
        if self.source_location is not None:
            result["source"] = self.source_location
        return result

    def to_summary(self) -> dict[str, Any]:
        """Short form used in search results and listings."""
        return {
            "name": self.display_name,
            "id": self.id,
            "index": self.sequence_index,
            "category": self.category,
            "description": self.description,
            "is_unreleased": self.is_unreleased,
        }
