"""
MCP Tool definitions for the PMDO query server.

All tools are defined here with their schemas.
Handlers are implemented in handlers.py.
"""

from typing import Any

from ..data.categories import CATEGORIES, CATEGORY_NAMES
from ..scaffold import TACTICS

# Tool schema type
Tool = dict[str, Any]

_CATEGORY_LIST = "\n".join(f"- {name}: {cat.description}" for name, cat in CATEGORIES.items())

_CATEGORY_PROPERTY = {"type": "string", "enum": CATEGORY_NAMES, "description": "Data category"}


# ==================== Data Tools ====================

DATA_TOOLS: list[Tool] = [
    {
        "name": "pmdo_search",
        "description": (
            "Search for PMDO game data entries across all categories by name. "
            "Returns matches ranked by relevance (exact, prefix, substring, description, fuzzy).\n\n"
            f"Categories: {', '.join(CATEGORY_NAMES)}"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "minLength": 1, "description": "Search query (e.g., 'apple', 'thunderbolt')"},
                "category": {**_CATEGORY_PROPERTY, "description": "Optional category to limit search"},
                "limit": {"type": "integer", "minimum": 1, "maximum": 50, "description": "Maximum results (default 20)"},
                "include_unreleased": {"type": "boolean", "description": "Include unreleased/WIP entries marked with ** (default false)"},
            },
            "required": ["query"],
        },
    },
    {
        "name": "pmdo_list_data",
        "description": f"List PMDO game data entries by category.\n\nCategories:\n{_CATEGORY_LIST}",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": _CATEGORY_PROPERTY,
                "limit": {"type": "integer", "minimum": 1, "maximum": 100, "description": "Maximum results (default 50)"},
                "offset": {"type": "integer", "minimum": 0, "description": "Number of results to skip (default 0)"},
                "include_unreleased": {"type": "boolean", "description": "Include unreleased/WIP entries (default false)"},
            },
            "required": ["category"],
        },
    },
    {
        "name": "pmdo_get_entry",
        "description": "Get detailed information about a specific PMDO game data entry by ID, name or index.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": _CATEGORY_PROPERTY,
                "id": {"type": "string", "minLength": 1, "description": "Entry ID, name or index to look up"},
            },
            "required": ["category", "id"],
        },
    },
    {
        "name": "pmdo_stats",
        "description": "Get released/unreleased entry counts for each data category.",
        "inputSchema": {
            "type": "object",
            "properties": {},
        },
    },
]


# ==================== Class Documentation Tools ====================

CLASS_TOOLS: list[Tool] = [
    {
        "name": "pmdo_list_classes",
        "description": "List classes declared in a PMDO data category's source files with their XML doc summaries.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": _CATEGORY_PROPERTY,
            },
            "required": ["category"],
        },
    },
    {
        "name": "pmdo_get_class_docs",
        "description": (
            "Get XML documentation for a PMDO class: summary, remarks, "
            "public fields/properties and public method signatures."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "class_name": {"type": "string", "minLength": 1, "description": "Class name (case-insensitive)"},
            },
            "required": ["class_name"],
        },
    },
]


# ==================== Scaffolding Tools ====================

SCAFFOLD_TOOLS: list[Tool] = [
    {
        "name": "pmdo_scaffold_spawn",
        "description": "Generate a GetTeamMob monster spawn entry for a PMDO zone's spawn table.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "species": {"type": "string", "description": "Species ID (lowercase, e.g., 'pikachu', 'mr_mime')"},
                "ability": {"type": "string", "description": "Ability ID (empty for default ability)"},
                "moves": {"type": "array", "items": {"type": "string"}, "maxItems": 4, "description": "Move IDs (up to 4)"},
                "level": {"type": "integer", "minimum": 1, "maximum": 100, "description": "Level"},
                "level_variance": {"type": "integer", "minimum": 0, "description": "Level variance +/- (default 2)"},
                "tactic": {"type": "string", "enum": list(TACTICS), "description": "AI tactic (default wander_dumb)"},
                "floor_start": {"type": "integer", "minimum": 0, "description": "First floor (default 0)"},
                "floor_end": {"type": "integer", "minimum": 1, "description": "Last floor, exclusive"},
                "weight": {"type": "integer", "minimum": 1, "description": "Spawn weight (default 10)"},
            },
            "required": ["species", "level", "floor_end"],
        },
    },
    {
        "name": "pmdo_scaffold_item_spawn",
        "description": "Generate an item spawn entry for a PMDO zone's item table.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "item_id": {"type": "string", "description": "Item ID (e.g., 'berry_oran', 'seed_reviver')"},
                "floor_start": {"type": "integer", "minimum": 0, "description": "First floor (default 0)"},
                "floor_end": {"type": "integer", "minimum": 1, "description": "Last floor, exclusive"},
                "weight": {"type": "integer", "minimum": 1, "description": "Spawn weight (default 10)"},
                "category": {"type": "string", "description": "Item spawn category (default necessities)"},
            },
            "required": ["item_id", "floor_end"],
        },
    },
]


# All tools combined
ALL_TOOLS: list[Tool] = [
    *DATA_TOOLS,
    *CLASS_TOOLS,
    *SCAFFOLD_TOOLS,
]
