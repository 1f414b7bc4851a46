"""
Exceptions raised by the PMDO query server.

Most input problems (missing files, malformed JSON, unparseable sources)
degrade to empty results and never surface here. Only caller mistakes and
grammar initialization failures are raised.
"""


class PmdoError(Exception):
    """Base class for PMDO query errors."""


class UnknownCategoryError(PmdoError, ValueError):
    """Raised when a category name is not in the registry."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown category: {name!r} (expected one of: {', '.join(known)})")


class GrammarInitError(PmdoError):
    """Raised when the C# grammar or parser cannot be initialized."""


class InvalidArgumentError(PmdoError, ValueError):
    """Raised when a tool argument is missing or out of range."""
