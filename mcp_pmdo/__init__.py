"""
PMDO MCP Server - entry extraction, fuzzy search and class documentation
over PMD: Origins generator sources and data snapshots.
"""

__version__ = "1.0.0"
