"""
Tool definitions and handlers for the PMDO query server.

Categories:
- Data tools: search, list, look up and count game data entries
- Class tools: XML documentation for generator classes
- Scaffolding tools: spawn table snippets
"""

from .definitions import ALL_TOOLS
from .handlers import ToolHandlers

__all__ = ["ALL_TOOLS", "ToolHandlers"]
