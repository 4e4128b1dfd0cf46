from __future__ import annotations

"""
Structure Parsing Service.

Public entry point of the parser: rejects blank input, classifies the
text, and dispatches to the matching tree builder.
"""

import logging
from typing import Callable, Dict, List

from foldersetup.core.analysis.flattener import flatten
from foldersetup.core.parsing.builders import (
    build_from_indented_outline,
    build_from_path_list,
    build_from_structured,
)
from foldersetup.core.parsing.classifier import (
    StructureFormat,
    classify_format,
    non_blank_lines,
)
from foldersetup.domain.tree_models import FlatEntry, FolderNode

logger = logging.getLogger(__name__)

_LINE_BUILDERS: Dict[StructureFormat, Callable[[List[str]], FolderNode]] = {
    StructureFormat.PATH_LIST: build_from_path_list,
    StructureFormat.INDENTED_OUTLINE: build_from_indented_outline,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_structure(text: str) -> FolderNode:
    """
    Parse a structure description in any supported format.

    Args:
        text: Raw structure text (JSON, path list or indented outline).

    Returns:
        FolderNode: Root of the parsed tree.

    Raises:
        EmptyInputError: If the text is empty or whitespace-only.
        StructureDecodeError: If JSON input is malformed.
    """
    fmt = classify_format(text)
    logger.info(f"Detected structure format: {fmt.value}")

    if fmt is StructureFormat.STRUCTURED:
        return build_from_structured(text)

    return _LINE_BUILDERS[fmt](non_blank_lines(text))


def parse_to_paths(text: str) -> List[FlatEntry]:
    """
    Parse a structure description and flatten it into (path, is_file) pairs.

    Args:
        text: Raw structure text.

    Returns:
        List[FlatEntry]: Root-relative paths in depth-first order.
    """
    entries = flatten(parse_structure(text))
    logger.debug(f"Flattened structure into {len(entries)} entries")
    return entries
