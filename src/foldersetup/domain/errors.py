from __future__ import annotations

"""
Parsing Error Taxonomy.

All failures raised by the structure parser derive from StructureParseError
so interface layers can handle them with a single except clause.
"""


class StructureParseError(ValueError):
    """Base class for every structure parsing failure."""


class EmptyInputError(StructureParseError):
    """Raised when the structure text is empty or whitespace-only."""

    def __init__(self, message: str = "Empty structure text.") -> None:
        super().__init__(message)


class StructureDecodeError(StructureParseError):
    """
    Raised when structured (JSON) input cannot be decoded into a tree.

    Attributes:
        reason: Human-readable description of the underlying failure.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid structured input: {reason}")
