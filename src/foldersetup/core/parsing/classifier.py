from __future__ import annotations

"""
Format Classifier.

Selects the parsing strategy for a raw structure description. Path lists
and outlines are both plain text; the density of lines starting with the
root prefix is what tells "one full path per line" apart from "one
segment per line at some depth".
"""

import logging
from enum import Enum
from typing import List

from foldersetup.domain.constants import ROOT_NAME
from foldersetup.domain.errors import EmptyInputError

logger = logging.getLogger(__name__)

_PATH_PREFIXES = (f"{ROOT_NAME}/", f"{ROOT_NAME}\\")


class StructureFormat(Enum):
    """Surface syntaxes understood by the parser."""
    STRUCTURED = "structured"
    PATH_LIST = "path_list"
    INDENTED_OUTLINE = "indented_outline"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def looks_like_json(text: str) -> bool:
    """Return True if the first non-whitespace character opens a JSON value."""
    stripped = text.lstrip()
    return stripped[:1] in ("{", "[")


def classify_format(text: str) -> StructureFormat:
    """
    Choose the parsing strategy for a structure description.

    Args:
        text: Raw structure text.

    Returns:
        StructureFormat: The selected strategy.

    Raises:
        EmptyInputError: If the text is empty or whitespace-only.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    if looks_like_json(text):
        return StructureFormat.STRUCTURED

    lines = non_blank_lines(text)
    path_lines = sum(1 for line in lines if line.lstrip().startswith(_PATH_PREFIXES))
    threshold = max(1, len(lines) // 2)

    logger.debug(f"Path-prefixed lines: {path_lines}/{len(lines)} (threshold {threshold})")

    if path_lines >= threshold:
        return StructureFormat.PATH_LIST
    return StructureFormat.INDENTED_OUTLINE


def non_blank_lines(text: str) -> List[str]:
    """Split text on CRLF/LF newlines and drop whitespace-only lines."""
    return [line for line in text.replace("\r\n", "\n").split("\n") if line.strip()]
