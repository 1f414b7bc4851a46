"""
Tool handlers for the PMDO query server.

Implements the actual logic for each tool defined in definitions.py.
Every call re-reads the project files; nothing is cached between calls.
File reads run in a worker thread so the event loop stays free.
"""

import asyncio
from pathlib import Path
from typing import Any

from ..config import ProjectPaths
from ..data.categories import get_category
from ..errors import InvalidArgumentError, UnknownCategoryError
from ..indexer import find_class, find_classes_in_category
from ..scaffold import scaffold_item_spawn, scaffold_spawn
from ..search import category_stats, list_by_category, lookup_entry, search


def _str_arg(args: dict[str, Any], name: str, default: str | None = None) -> str:
    """Read a string argument; required when no default is given."""
    value = args.get(name, default)
    if value is None:
        raise InvalidArgumentError(f"Missing required argument: {name}")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


def _int_arg(
    args: dict[str, Any],
    name: str,
    default: int | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read an integer argument and check its range."""
    value = args.get(name, default)
    if value is None:
        raise InvalidArgumentError(f"Missing required argument: {name}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer")
    if minimum is not None and value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise InvalidArgumentError(f"{name} must be <= {maximum}")
    return value


def _bool_arg(args: dict[str, Any], name: str, default: bool = False) -> bool:
    return bool(args.get(name, default))


class ToolHandlers:
    """Handlers for all MCP tools.

    Holds only read-only configuration; every handler reads its inputs fresh.
    """

    def __init__(self, project_root: Path | ProjectPaths):
        """Initialize tool handlers.

        Args:
            project_root: Project root directory, or prepared ProjectPaths
        """
        if isinstance(project_root, ProjectPaths):
            self.paths = project_root
        else:
            self.paths = ProjectPaths(root=Path(project_root).resolve())

    async def handle_tool(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Route tool call to appropriate handler.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Tool result

        Raises:
            ValueError: If the tool name is unknown
        """
        handler = getattr(self, f"_handle_{name}", None)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")
        try:
            return await handler(arguments)
        except (InvalidArgumentError, UnknownCategoryError) as e:
            return {"success": False, "error": str(e)}

    # ==================== Data Tools ====================

    async def _handle_pmdo_search(self, args: dict[str, Any]) -> dict[str, Any]:
        """Ranked fuzzy search across categories."""
        query = _str_arg(args, "query")
        if not query.strip():
            raise InvalidArgumentError("query must not be empty")
        category = args.get("category")
        limit = _int_arg(args, "limit", 20, minimum=1, maximum=50)

        matches = await asyncio.to_thread(
            search,
            query,
            self.paths,
            categories=[_str_arg(args, "category")] if category else None,
            limit=limit,
            include_unreleased=_bool_arg(args, "include_unreleased"),
        )
        return {
            "success": True,
            "query": query,
            "count": len(matches),
            "results": [m.to_dict() for m in matches],
        }

    async def _handle_pmdo_list_data(self, args: dict[str, Any]) -> dict[str, Any]:
        """Page through one category."""
        category = get_category(_str_arg(args, "category"))
        page = await asyncio.to_thread(
            list_by_category,
            category.name,
            self.paths,
            limit=_int_arg(args, "limit", 50, minimum=1, maximum=100),
            offset=_int_arg(args, "offset", 0, minimum=0),
            include_unreleased=_bool_arg(args, "include_unreleased"),
        )
        result = page.to_dict()
        result["success"] = True
        result["description"] = category.description
        return result

    async def _handle_pmdo_get_entry(self, args: dict[str, Any]) -> dict[str, Any]:
        """Look up one entry; a miss comes back with suggestions."""
        found = await asyncio.to_thread(lookup_entry, _str_arg(args, "category"), _str_arg(args, "id"), self.paths)
        result = found.to_dict()
        result["success"] = True
        return result

    async def _handle_pmdo_stats(self, args: dict[str, Any]) -> dict[str, Any]:
        """Entry counts per category."""
        stats = await asyncio.to_thread(category_stats, self.paths)
        return {
            "success": True,
            "categories": [s.to_dict() for s in stats],
            "total": sum(s.total for s in stats),
        }

    # ==================== Class Documentation Tools ====================

    async def _handle_pmdo_list_classes(self, args: dict[str, Any]) -> dict[str, Any]:
        """Classes declared in a category's source files."""
        category = get_category(_str_arg(args, "category"))
        classes = await find_classes_in_category(category, self.paths)
        result: dict[str, Any] = {"success": True}
        result.update(category.to_dict())
        result["count"] = len(classes)
        result["classes"] = [c.to_summary() for c in classes]
        return result

    async def _handle_pmdo_get_class_docs(self, args: dict[str, Any]) -> dict[str, Any]:
        """Full documentation for one class."""
        class_name = _str_arg(args, "class_name")
        descriptor = await find_class(class_name, self.paths)
        if descriptor is None:
            return {
                "success": False,
                "error": f"Class '{class_name}' not found. Use pmdo_list_classes to see available classes.",
            }
        return {"success": True, "class": descriptor.to_dict()}

    # ==================== Scaffolding Tools ====================

    async def _handle_pmdo_scaffold_spawn(self, args: dict[str, Any]) -> dict[str, Any]:
        """Monster spawn snippet."""
        moves = args.get("moves") or []
        if not isinstance(moves, list) or not all(isinstance(m, str) for m in moves):
            raise InvalidArgumentError("moves must be a list of strings")

        result = await asyncio.to_thread(
            scaffold_spawn,
            self.paths,
            species=_str_arg(args, "species"),
            level=_int_arg(args, "level", minimum=1, maximum=100),
            floor_end=_int_arg(args, "floor_end", minimum=1),
            ability=_str_arg(args, "ability", ""),
            moves=moves,
            level_variance=_int_arg(args, "level_variance", 2, minimum=0),
            tactic=_str_arg(args, "tactic", "wander_dumb"),
            floor_start=_int_arg(args, "floor_start", 0, minimum=0),
            weight=_int_arg(args, "weight", 10, minimum=1),
        )
        return result.to_dict()

    async def _handle_pmdo_scaffold_item_spawn(self, args: dict[str, Any]) -> dict[str, Any]:
        """Item spawn snippet."""
        result = await asyncio.to_thread(
            scaffold_item_spawn,
            self.paths,
            item_id=_str_arg(args, "item_id"),
            floor_end=_int_arg(args, "floor_end", minimum=1),
            floor_start=_int_arg(args, "floor_start", 0, minimum=0),
            weight=_int_arg(args, "weight", 10, minimum=1),
            category=_str_arg(args, "category", "necessities"),
        )
        return result.to_dict()
