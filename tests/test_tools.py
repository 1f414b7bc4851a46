"""
Tests for MCP tools module.

Tests cover:
- Tool definitions
- Handler routing
- Individual tool handlers
"""

import threading

import pytest

from mcp_pmdo.data import CATEGORY_NAMES, get_entries
from mcp_pmdo.server import create_server
from mcp_pmdo.tools import ALL_TOOLS, ToolHandlers
from mcp_pmdo.tools.definitions import CLASS_TOOLS, DATA_TOOLS, SCAFFOLD_TOOLS


# ==================== Tool Definitions Tests ====================


class TestToolDefinitions:
    """Test tool definition schemas."""

    def test_all_tools_count(self):
        """Verify total tool count."""
        assert len(ALL_TOOLS) == len(DATA_TOOLS) + len(CLASS_TOOLS) + len(SCAFFOLD_TOOLS)

    def test_data_tools_names(self):
        """Verify data tool names."""
        names = {t["name"] for t in DATA_TOOLS}
        assert names == {"pmdo_search", "pmdo_list_data", "pmdo_get_entry", "pmdo_stats"}

    def test_class_tools_names(self):
        """Verify class documentation tool names."""
        names = {t["name"] for t in CLASS_TOOLS}
        assert names == {"pmdo_list_classes", "pmdo_get_class_docs"}

    def test_scaffold_tools_names(self):
        """Verify scaffolding tool names."""
        names = {t["name"] for t in SCAFFOLD_TOOLS}
        assert names == {"pmdo_scaffold_spawn", "pmdo_scaffold_item_spawn"}

    def test_tool_schema_format(self):
        """Verify all tools have required schema fields."""
        for tool in ALL_TOOLS:
            assert "name" in tool, f"Tool missing name: {tool}"
            assert "description" in tool, f"Tool missing description: {tool}"
            assert "inputSchema" in tool, f"Tool missing inputSchema: {tool}"
            assert tool["inputSchema"]["type"] == "object"

    def test_every_tool_has_a_handler(self, paths):
        handlers = ToolHandlers(paths)
        for tool in ALL_TOOLS:
            assert hasattr(handlers, f"_handle_{tool['name']}"), tool["name"]

    def test_category_descriptions_listed(self):
        list_data = next(t for t in DATA_TOOLS if t["name"] == "pmdo_list_data")
        for name in CATEGORY_NAMES:
            assert name in list_data["description"]


# ==================== Handler Routing Tests ====================


class TestHandlerRouting:
    """Test handler routing logic."""

    def test_handlers_init_from_path(self, project_root):
        """Test handlers initialization."""
        handlers = ToolHandlers(project_root)
        assert handlers.paths.root == project_root.resolve()

    def test_handlers_init_from_paths(self, paths):
        assert ToolHandlers(paths).paths is paths

    @pytest.mark.asyncio
    async def test_handle_unknown_tool(self, paths):
        """Test handling of unknown tool."""
        handlers = ToolHandlers(paths)

        with pytest.raises(ValueError, match="Unknown tool"):
            await handlers.handle_tool("nonexistent_tool", {})

    @pytest.mark.asyncio
    async def test_missing_argument(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_search", {})

        assert result == {"success": False, "error": "Missing required argument: query"}

    @pytest.mark.asyncio
    async def test_out_of_range_argument(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_list_data", {"category": "items", "limit": 0})

        assert not result["success"]
        assert result["error"] == "limit must be >= 1"

    @pytest.mark.asyncio
    async def test_unknown_category(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_list_data", {"category": "pokeballs"})

        assert not result["success"]
        assert "pokeballs" in result["error"]

    def test_create_server(self, paths):
        server, handlers = create_server(paths)

        assert server.name == "pmdo-mcp-server"
        assert handlers.paths == paths


# ==================== Data Tools Tests ====================


class TestDataTools:
    """Test entry search, listing and lookup tools."""

    @pytest.mark.asyncio
    async def test_search(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_search", {"query": "Apple", "category": "items"})

        assert result["success"]
        assert result["count"] == 2
        assert result["results"][0]["name"] == "Apple"
        assert result["results"][0]["score"] == 0

    @pytest.mark.asyncio
    async def test_search_include_unreleased(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool(
            "pmdo_search", {"query": "Apple", "category": "items", "include_unreleased": True}
        )
        assert result["count"] == 3

    @pytest.mark.asyncio
    async def test_search_blank_query(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_search", {"query": "   "})
        assert result == {"success": False, "error": "query must not be empty"}

    @pytest.mark.asyncio
    async def test_list_data(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_list_data", {"category": "monsters", "limit": 2})

        assert result["success"]
        assert result["total"] == 3
        assert [e["id"] for e in result["entries"]] == ["bulbasaur", "pikachu"]
        assert result["has_more"]
        assert result["next_offset"] == 2
        assert result["description"]

    @pytest.mark.asyncio
    async def test_get_entry_found(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_get_entry", {"category": "items", "id": "food_apple"})

        assert result["success"]
        assert result["found"]
        assert result["entry"]["name"] == "Apple"
        assert result["entry"]["sprite"] == "Apple_Red"

    @pytest.mark.asyncio
    async def test_get_entry_not_found(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_get_entry", {"category": "items", "id": "appl"})

        assert result["success"]
        assert not result["found"]
        assert result["suggestions"][0]["id"] == "food_apple"

    @pytest.mark.asyncio
    async def test_stats(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_stats", {})

        assert result["success"]
        assert [c["category"] for c in result["categories"]] == list(CATEGORY_NAMES)
        assert result["total"] == sum(c["total"] for c in result["categories"])

    @pytest.mark.asyncio
    async def test_file_reads_run_in_worker_thread(self, paths, monkeypatch):
        loop_thread = threading.get_ident()
        reader_threads = []

        def recording_get_entries(category, project_paths):
            reader_threads.append(threading.get_ident())
            return get_entries(category, project_paths)

        monkeypatch.setattr("mcp_pmdo.search.engine.get_entries", recording_get_entries)
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_search", {"query": "Apple", "category": "items"})

        assert result["count"] == 2
        assert reader_threads
        assert loop_thread not in reader_threads

    @pytest.mark.asyncio
    async def test_missing_project_degrades(self, empty_paths):
        handlers = ToolHandlers(empty_paths)

        result = await handlers.handle_tool("pmdo_search", {"query": "Apple"})
        assert result["success"]
        assert result["count"] == 0

        result = await handlers.handle_tool("pmdo_stats", {})
        assert result["total"] == 0


# ==================== Class Documentation Tools Tests ====================


class TestClassTools:
    """Test class listing and documentation tools."""

    @pytest.mark.asyncio
    async def test_list_classes(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_list_classes", {"category": "skills"})

        assert result["success"]
        assert result["count"] == 4
        assert result["files"] == ["Skills/SkillInfo.cs", "Skills/SkillsPMD.cs", "Skills/SkillsGen5Plus.cs"]
        assert result["classes"][1]["name"] == "SkillBuilder"
        assert result["key_types"] == ["SkillData", "GetSkillData"]
        assert result["mode"] == "source"

    @pytest.mark.asyncio
    async def test_get_class_docs(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_get_class_docs", {"class_name": "skillinfo"})

        assert result["success"]
        assert result["class"]["name"] == "SkillInfo"
        assert result["class"]["summary"] == "Provides skill data generation."
        assert result["class"]["file"] == "DataGenerator/Data/Skills/SkillInfo.cs"

    @pytest.mark.asyncio
    async def test_get_class_docs_not_found(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_get_class_docs", {"class_name": "Nope"})

        assert not result["success"]
        assert result["error"].startswith("Class 'Nope' not found")


# ==================== Scaffolding Tools Tests ====================


class TestScaffoldTools:
    """Test snippet generation tools."""

    @pytest.mark.asyncio
    async def test_scaffold_spawn(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool(
            "pmdo_scaffold_spawn",
            {"species": "eevee", "level": 20, "floor_end": 8, "moves": ["tackle", "growl"]},
        )

        assert result["success"]
        assert 'GetTeamMob("eevee", "", "tackle", "growl", "", "",' in result["code"]
        assert "warnings" not in result

    @pytest.mark.asyncio
    async def test_scaffold_spawn_bad_moves(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool(
            "pmdo_scaffold_spawn", {"species": "eevee", "level": 20, "floor_end": 8, "moves": "tackle"}
        )
        assert result == {"success": False, "error": "moves must be a list of strings"}

    @pytest.mark.asyncio
    async def test_scaffold_spawn_validation_errors(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool(
            "pmdo_scaffold_spawn", {"species": "eevee", "level": 20, "floor_start": 9, "floor_end": 8}
        )

        assert not result["success"]
        assert result["errors"] == ["floor_start (9) must be less than floor_end (8)."]

    @pytest.mark.asyncio
    async def test_scaffold_item_spawn(self, paths):
        handlers = ToolHandlers(paths)
        result = await handlers.handle_tool("pmdo_scaffold_item_spawn", {"item_id": "oran_berry", "floor_end": 4})

        assert result["success"]
        assert 'new InvItem("oran_berry")' in result["code"]
