from __future__ import annotations

"""
Structure Parsing Subsystem.

Format detection, line normalization, file-kind heuristics and the three
tree builders (structured, path list, indented outline).
"""

from foldersetup.core.parsing.builders import (
    build_from_indented_outline,
    build_from_path_list,
    build_from_structured,
)
from foldersetup.core.parsing.classifier import StructureFormat, classify_format
from foldersetup.core.parsing.heuristics import is_file_name
from foldersetup.core.parsing.normalizer import normalize_line, split_segments
from foldersetup.core.parsing.service import parse_structure, parse_to_paths

__all__ = [
    "StructureFormat",
    "classify_format",
    "normalize_line",
    "split_segments",
    "is_file_name",
    "build_from_structured",
    "build_from_path_list",
    "build_from_indented_outline",
    "parse_structure",
    "parse_to_paths",
]
