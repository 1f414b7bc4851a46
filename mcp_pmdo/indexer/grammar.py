"""
Process-wide C# grammar initialization.

The parser is the one piece of shared state in the server. It is created
lazily on first use, exactly once; callers that arrive while initialization
is in flight wait for it instead of starting their own.
"""

import asyncio
import logging
from typing import Callable

from ..errors import GrammarInitError
from .parser import CSharpParser

logger = logging.getLogger(__name__)


class GrammarLoader:
    """Single-initialization guard around a CSharpParser."""

    def __init__(self, factory: Callable[[], CSharpParser] = CSharpParser):
        """Initialize the loader.

        Args:
            factory: Callable building the parser (runs in a worker thread)
        """
        self._factory = factory
        self._parser: CSharpParser | None = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._parser is not None

    async def get(self) -> CSharpParser:
        """Return the parser, initializing it on first call.

        Raises:
            GrammarInitError: If the grammar cannot be loaded
        """
        if self._parser is not None:
            return self._parser

        async with self._lock:
            if self._parser is None:
                logger.info("Initializing tree-sitter C# parser...")
                try:
                    self._parser = await asyncio.to_thread(self._factory)
                except Exception as e:
                    raise GrammarInitError(f"Could not initialize C# grammar: {e}") from e
                logger.info("Parser initialized successfully")
        return self._parser


_loader = GrammarLoader()


async def get_parser() -> CSharpParser:
    """Process-wide parser accessor."""
    return await _loader.get()
