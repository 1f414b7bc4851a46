"""Setup script for mcp-pmdo.

This package provides an MCP server for querying PMD: Origins game data:
ranked fuzzy search over items, skills, monsters and zones extracted from the
DataGenerator sources and DumpAsset snapshots, plus XML documentation for the
generator's C# classes.

Installation:
    pip install -e .

Usage:
    PMDO_PROJECT_ROOT=/path/to/PMDOData mcp-pmdo
"""

from setuptools import setup, find_packages

setup(
    name="mcp-pmdo",
    version="1.0.0",
    description="MCP server for querying PMD: Origins game data and generator docs",
    packages=find_packages(include=["mcp_pmdo", "mcp_pmdo.*"]),
    python_requires=">=3.10",
    install_requires=[
        "mcp>=1.0.0,<2",
        "tree-sitter>=0.22.0",
        "tree-sitter-c-sharp>=0.21.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "mypy>=1.0.0",
            "black>=23.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcp-pmdo=mcp_pmdo.server:cli_main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
