from __future__ import annotations

"""
FolderSetup.

Parses human-authored folder structure descriptions (JSON trees, path
lists, indented outlines) into a normalized tree and a flat path list.
"""

from foldersetup.core.analysis.flattener import flatten
from foldersetup.core.parsing.service import parse_structure, parse_to_paths
from foldersetup.domain.errors import (
    EmptyInputError,
    StructureDecodeError,
    StructureParseError,
)
from foldersetup.domain.tree_models import FolderNode

__version__ = "1.0.0"

__all__ = [
    "FolderNode",
    "parse_structure",
    "parse_to_paths",
    "flatten",
    "StructureParseError",
    "EmptyInputError",
    "StructureDecodeError",
]
