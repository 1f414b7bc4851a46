"""
Entry extraction from pre-baked JSON snapshots.

Snapshot categories ship as a dumped index, `<Folder>/index.idx`:

    {
        "Object": {
            "$type": "...",
            "bulbasaur": {"Name": {"DefaultText": "Bulbasaur"}, "Released": true, "SortOrder": 1},
            ...
        }
    }

with an optional `<Folder>/<id>.json` per entry carrying extended fields.
"""

import logging
from pathlib import Path
from typing import Any

from ..config import ProjectPaths
from .categories import Category
from .files import read_json
from .types import Entry

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.idx"

# Reserved key holding the serializer's type annotation
TYPE_TAG_KEY = "$type"


def _localized_text(value: Any) -> str:
    """Pull DefaultText out of a localized text object."""
    if isinstance(value, dict):
        text = value.get("DefaultText")
        if isinstance(text, str):
            return text
    return ""


def read_companion_field(folder: Path, entry_id: str, field_name: str) -> str:
    """Read one localized field from an entry's companion file.

    A missing or malformed companion is expected and yields "".
    """
    data = read_json(folder / f"{entry_id}.json", quiet=True)
    if not isinstance(data, dict):
        return ""
    obj = data.get("Object")
    if not isinstance(obj, dict):
        return ""
    return _localized_text(obj.get(field_name))


def parse_snapshot_index(
    data: Any,
    category: Category,
    folder: Path | None = None,
) -> list[Entry]:
    """Build entries from a decoded snapshot index.

    Args:
        data: Decoded index.idx document
        category: Category the index belongs to
        folder: Snapshot folder, for companion lookups

    Returns:
        Entries sorted by sort order
    """
    objects = data.get("Object") if isinstance(data, dict) else None
    if not isinstance(objects, dict):
        logger.warning(f"Invalid index structure for {category.name}: missing Object dictionary")
        return []

    entries: list[Entry] = []
    position = 0
    for entry_id, meta in objects.items():
        if entry_id == TYPE_TAG_KEY:
            continue
        if not isinstance(meta, dict):
            meta = {}

        name = _localized_text(meta.get("Name")) or entry_id
        released = meta.get("Released")
        if not isinstance(released, bool):
            released = True
        sort_order = meta.get("SortOrder")
        if not isinstance(sort_order, int) or isinstance(sort_order, bool):
            sort_order = position
        position += 1

        description = ""
        if category.companion_field and folder is not None:
            description = read_companion_field(folder, entry_id, category.companion_field)

        if not name:
            continue

        entries.append(
            Entry(
                sequence_index=sort_order,
                id=entry_id,
                display_name=name,
                raw_name=name,
                category=category.name,
                description=description,
                is_unreleased=not released,
            )
        )

    entries.sort(key=lambda e: e.sequence_index)
    return entries


def extract_snapshot_entries(category: Category, paths: ProjectPaths) -> list[Entry]:
    """Extract entries for a snapshot-distributed category.

    Returns:
        Entries sorted by sort order, or [] if the index is missing or malformed
    """
    if not category.snapshot_folder:
        logger.warning(f"Category {category.name} has no snapshot folder")
        return []

    folder = paths.dump_asset_dir / category.snapshot_folder
    data = read_json(folder / INDEX_FILE_NAME)
    if data is None:
        return []

    return parse_snapshot_index(data, category, folder)
