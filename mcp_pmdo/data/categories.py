"""
Fixed registry of PMDO data categories.

Each category names the generator source files that declare its types and
says where its entries come from: the generator source itself, or a
pre-baked JSON snapshot in the dump folder.
"""

from dataclasses import dataclass
from enum import Enum

from ..errors import UnknownCategoryError


class DistributionMode(str, Enum):
    """Where a category's entries are read from."""

    SOURCE = "source"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True)
class Category:
    """Static descriptor for one data category."""

    name: str
    description: str
    files: tuple[str, ...]
    mode: DistributionMode = DistributionMode.SOURCE
    snapshot_folder: str | None = None
    companion_field: str | None = None
    search_patterns: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, object] = {
            "category": self.name,
            "description": self.description,
            "files": list(self.files),
            "mode": self.mode.value,
        }
        if self.snapshot_folder:
            result["snapshot_folder"] = self.snapshot_folder
        if self.search_patterns:
            result["key_types"] = list(self.search_patterns)
        return result


CATEGORIES: dict[str, Category] = {
    "monsters": Category(
        name="monsters",
        description="Pokemon species data - stats, types, abilities, evolutions",
        files=("MonsterInfo.cs",),
        mode=DistributionMode.SNAPSHOT,
        snapshot_folder="Monster",
        companion_field="Title",
        search_patterns=("MonsterData", "MonsterFormData", "DexColor", "BodyShape"),
    ),
    "items": Category(
        name="items",
        description="Game items - consumables, held items, TMs, orbs, exclusives",
        files=("ItemInfo.cs",),
        search_patterns=("ItemData", "GetItemData"),
    ),
    "skills": Category(
        name="skills",
        description="Pokemon moves/skills - power, accuracy, effects, animations",
        files=("Skills/SkillInfo.cs", "Skills/SkillsPMD.cs", "Skills/SkillsGen5Plus.cs"),
        search_patterns=("SkillData", "GetSkillData"),
    ),
    "zones": Category(
        name="zones",
        description="Dungeon zones - floor layouts, spawn tables, item pools",
        files=(
            "Zones/ZoneInfo.cs",
            "Zones/ZoneInfoHelpers.cs",
            "Zones/ZoneInfoTables.cs",
            "Zones/ZoneInfoPostgame.cs",
            "Zones/ZoneInfoOptional.cs",
            "Zones/ZoneInfoChallenge.cs",
            "Zones/ZoneInfoRogue.cs",
            "Zones/ZoneInfoBase.cs",
        ),
        search_patterns=("ZoneData", "GetZoneData", "FillZone", "GetTeamMob"),
    ),
    "intrinsics": Category(
        name="intrinsics",
        description="Pokemon abilities/intrinsics",
        files=("IntrinsicInfo.cs",),
        search_patterns=("IntrinsicData", "GetIntrinsicData"),
    ),
    "statuses": Category(
        name="statuses",
        description="Status conditions - poison, sleep, stat changes",
        files=("StatusInfo.cs",),
        search_patterns=("StatusData", "GetStatusData"),
    ),
    "elements": Category(
        name="elements",
        description="Type chart and element definitions",
        files=("ElementInfo.cs",),
        mode=DistributionMode.SNAPSHOT,
        snapshot_folder="Element",
        search_patterns=("ElementData", "GetElementData"),
    ),
}

CATEGORY_NAMES: list[str] = list(CATEGORIES)


def get_category(name: str) -> Category:
    """Look up a category by name.

    Raises:
        UnknownCategoryError: If the name is not registered
    """
    try:
        return CATEGORIES[name]
    except KeyError:
        raise UnknownCategoryError(name, CATEGORY_NAMES) from None
