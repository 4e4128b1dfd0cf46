from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the process-wide lookup tables used by the structure parser:
recognized file extensions, decoration glyphs, bullet markers, and the
conventional root folder name.
"""

from typing import FrozenSet, Tuple

ROOT_NAME = "Assets"

# Leading tab counts as this many spaces of indentation
TAB_WIDTH = 4

# -----------------------------------------------------------------------------
# FILE CLASSIFICATION
# -----------------------------------------------------------------------------
FILE_EXTENSIONS: Tuple[str, ...] = (
    ".unity", ".asset", ".txt", ".md", ".json", ".xml", ".shader",
    ".mat", ".prefab", ".png", ".jpg", ".cs", ".asmdef",
)

# -----------------------------------------------------------------------------
# LINE DECORATIONS
# -----------------------------------------------------------------------------
COMMENT_MARKER = "#"
ANNOTATION_MARKER = "←"

BOX_DRAWING_GLYPHS: FrozenSet[str] = frozenset(
    "├└│─"
    "┣┗┃━"
    "┌┐┘┬┴┼╰╭╴╶"
)

BULLET_MARKERS: Tuple[str, ...] = ("-", "*", ">", "•", "|")

PATH_SEPARATORS: Tuple[str, ...] = ("/", "\\")

# -----------------------------------------------------------------------------
# SAMPLE INPUT
# -----------------------------------------------------------------------------
DEFAULT_STRUCTURE = """Assets
- Art
- Materials
- Scenes
    - 00_gym.unity
- Prefabs
- Scripts"""
