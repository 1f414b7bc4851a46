"""
PMDO MCP Server - query tools over PMD: Origins game data

Reads generator sources and snapshot dumps from a PMDO project checkout.
Never writes to the project.

Architecture:
- Data: entries extracted from generator sources or JSON snapshots
- Search: ranked fuzzy search and single-record lookup
- Indexer: tree-sitter C# class documentation
- Scaffold: spawn table snippets
"""

import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import ProjectPaths
from .indexer import get_parser
from .tools import ALL_TOOLS, ToolHandlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("mcp-pmdo")


def create_server(paths: ProjectPaths | None = None) -> tuple[Server, ToolHandlers]:
    """Create and configure MCP server.

    Args:
        paths: Project locations (discovered from the environment if omitted)

    Returns:
        Tuple of (server, handlers)
    """
    if paths is None:
        paths = ProjectPaths.from_env()

    logger.info("PMDO MCP Server initializing")
    logger.info(f"Project root: {paths.root}")
    logger.info(f"Data generator dir: {paths.data_gen_dir}")

    handlers = ToolHandlers(paths)
    server = Server("pmdo-mcp-server")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in ALL_TOOLS
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle tool invocation."""
        logger.info(f"Tool called: {name}")

        try:
            result = await handlers.handle_tool(name, arguments or {})
            return [TextContent(type="text", text=json.dumps(result, indent=2, default=str))]
        except Exception as e:
            logger.error(f"Tool error: {e}", exc_info=True)
            return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    return server, handlers


async def main():
    """Main entry point for MCP server."""
    logger.info("Starting PMDO MCP Server...")

    server, handlers = create_server()

    logger.info(f"Registered {len(ALL_TOOLS)} tools")

    # Warm the grammar up front; class tools retry on first use if this fails
    try:
        await get_parser()
    except Exception as e:
        logger.error(f"Parser initialization failed: {e}")

    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def cli_main():
    """CLI entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
