from __future__ import annotations

"""
Line Normalizer.

Turns a single human-typed outline line into its bare content and an
integer indentation depth. Comments, trailing annotations, box-drawing
connectors and bullet markers are decoration and are removed here so the
builders only ever see structural content.
"""

import re
import string
from typing import List, Tuple

from foldersetup.domain.constants import (
    ANNOTATION_MARKER,
    BOX_DRAWING_GLYPHS,
    BULLET_MARKERS,
    COMMENT_MARKER,
    PATH_SEPARATORS,
    TAB_WIDTH,
)

_GLYPH_TABLE = str.maketrans({glyph: " " for glyph in BOX_DRAWING_GLYPHS})
_SEPARATOR_RX = re.compile("|".join(re.escape(sep) for sep in PATH_SEPARATORS))
_TRAILING_CHARS = "/" + string.whitespace

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_line(raw_line: str) -> Tuple[str, int]:
    """
    Strip decorations from an outline line and measure its indentation.

    Processing order:
    1. Truncate at the first annotation arrow and the first comment marker.
    2. Replace every box-drawing glyph with a single space.
    3. Count leading whitespace (space = 1, tab = TAB_WIDTH).
    4. Remove any run of leading bullet markers.
    5. Remove trailing slashes and whitespace.

    Args:
        raw_line: A single line of user input, without its newline.

    Returns:
        Tuple[str, int]: Cleaned content (empty if the line was pure
                         decoration) and its indentation depth.
    """
    line = _strip_trailing_notes(raw_line)
    line = line.translate(_GLYPH_TABLE)

    indent, pos = _measure_indent(line)
    rest = line[pos:].lstrip()

    while rest.startswith(BULLET_MARKERS):
        rest = rest[1:].lstrip()

    return rest.rstrip(_TRAILING_CHARS), indent


def split_segments(content: str) -> List[str]:
    """
    Split normalized content on '/' or '\\' into trimmed, non-empty segments.

    Args:
        content: A cleaned line or path.

    Returns:
        List[str]: Ordered path segments.
    """
    segments = (part.strip() for part in _SEPARATOR_RX.split(content))
    return [s for s in segments if s]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_trailing_notes(line: str) -> str:
    """Drop everything after an annotation arrow or an inline comment."""
    for marker in (ANNOTATION_MARKER, COMMENT_MARKER):
        idx = line.find(marker)
        if idx >= 0:
            line = line[:idx]
    return line


def _measure_indent(line: str) -> Tuple[int, int]:
    """Return (indent units, index of first non-indent character)."""
    indent = 0
    pos = 0
    while pos < len(line) and line[pos] in (" ", "\t"):
        indent += TAB_WIDTH if line[pos] == "\t" else 1
        pos += 1
    return indent, pos
