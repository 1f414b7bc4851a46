"""
Snippet generation for zone spawn tables.

Produces C# text for the user to paste into a zone file. Nothing here writes
to the project.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from .config import ProjectPaths
from .data.categories import get_category
from .data.entries import get_entries

_GAME_ID_RE = re.compile(r"^[a-z0-9_]+$")

TACTICS = ("wander_dumb", "wander_normal", "slow_patrol", "weird_tree")

MIN_LEVEL = 1
MAX_LEVEL = 100
MOVE_SLOTS = 4


@dataclass
class ScaffoldResult:
    """Generated snippet plus any validation errors or warnings."""

    code: str = ""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {"success": self.success}
        if self.errors:
            result["errors"] = self.errors
        else:
            result["code"] = self.code
        if self.warnings:
            result["warnings"] = self.warnings
        return result


def validate_game_id(value: str, field_name: str) -> str | None:
    """Check an id is safe to splice into generated code.

    Returns:
        None if valid (empty is allowed), otherwise an error message
    """
    if not value:
        return None
    if not _GAME_ID_RE.match(value):
        return f"{field_name} contains invalid characters. Only lowercase letters, numbers, and underscores are allowed."
    return None


def _check_floors(floor_start: int, floor_end: int) -> str | None:
    if floor_start >= floor_end:
        return f"floor_start ({floor_start}) must be less than floor_end ({floor_end})."
    return None


def _known_ids(category: str, paths: ProjectPaths) -> set[str]:
    return {e.id for e in get_entries(get_category(category), paths)}


def scaffold_spawn(
    paths: ProjectPaths,
    species: str,
    level: int,
    floor_end: int,
    ability: str = "",
    moves: list[str] | None = None,
    level_variance: int = 2,
    tactic: str = "wander_dumb",
    floor_start: int = 0,
    weight: int = 10,
) -> ScaffoldResult:
    """Generate a GetTeamMob spawn entry for a zone's spawn table."""
    moves = list(moves or [])
    result = ScaffoldResult()

    floor_error = _check_floors(floor_start, floor_end)
    if floor_error:
        result.errors.append(floor_error)
    if len(moves) > MOVE_SLOTS:
        result.errors.append(f"At most {MOVE_SLOTS} moves are allowed, got {len(moves)}.")
    if tactic not in TACTICS:
        result.errors.append(f"Unknown tactic {tactic!r} (expected one of: {', '.join(TACTICS)}).")

    if not species:
        result.errors.append("species is required.")

    checks = [(species, "species"), (ability, "ability")]
    checks.extend((move, f"moves[{i}]") for i, move in enumerate(moves))
    for value, name in checks:
        error = validate_game_id(value, name)
        if error:
            result.errors.append(error)

    if result.errors:
        return result

    slots = (moves + [""] * MOVE_SLOTS)[:MOVE_SLOTS]
    if level_variance > 0:
        low = max(MIN_LEVEL, level - level_variance)
        high = min(MAX_LEVEL, level + level_variance)
        level_range = f"new RandRange({low}, {high})"
    else:
        level_range = f"new RandRange({level})"

    move_args = ", ".join(f'"{m}"' for m in slots)
    result.code = "\n".join(
        [
            f"// {species.capitalize()} spawn entry",
            "poolSpawn.Spawns.Add(",
            f'    GetTeamMob("{species}", "{ability}", {move_args},',
            f'        {level_range}, "{tactic}"),',
            f"    new IntRange({floor_start}, {floor_end}),",
            f"    {weight}",
            ");",
        ]
    )

    if species not in _known_ids("monsters", paths):
        result.warnings.append(f"Species '{species}' not found in game data. Verify the ID is correct.")
    return result


def scaffold_item_spawn(
    paths: ProjectPaths,
    item_id: str,
    floor_end: int,
    floor_start: int = 0,
    weight: int = 10,
    category: str = "necessities",
) -> ScaffoldResult:
    """Generate an item spawn entry for a zone's item table."""
    result = ScaffoldResult()

    floor_error = _check_floors(floor_start, floor_end)
    if floor_error:
        result.errors.append(floor_error)
    if not item_id:
        result.errors.append("item_id is required.")
    for value, name in ((item_id, "item_id"), (category, "category")):
        error = validate_game_id(value, name)
        if error:
            result.errors.append(error)

    if result.errors:
        return result

    result.code = "\n".join(
        [
            f"// Item spawn: {item_id}",
            f'{category}.Spawns.Add(new InvItem("{item_id}"), new IntRange({floor_start}, {floor_end}), {weight});',
        ]
    )

    if item_id not in _known_ids("items", paths):
        result.warnings.append(f"Item '{item_id}' not found in game data. Verify the ID is correct.")
    return result
