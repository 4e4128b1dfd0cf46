from __future__ import annotations

"""
Tree Builders.

One builder per surface syntax. Each returns a freshly built tree rooted
at a synthetic 'Assets' folder; the outline and path-list builders merge
repeated sibling names into a single node, the structured builder keeps
the tree exactly as decoded.
"""

import json
import logging
from typing import Any, Iterable, List, Tuple

from foldersetup.core.parsing.heuristics import is_file_name
from foldersetup.core.parsing.normalizer import normalize_line, split_segments
from foldersetup.domain.constants import COMMENT_MARKER, PATH_SEPARATORS, ROOT_NAME
from foldersetup.domain.errors import StructureDecodeError
from foldersetup.domain.tree_models import FolderNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# STRUCTURED (JSON) STRATEGY
# -----------------------------------------------------------------------------

def build_from_structured(text: str) -> FolderNode:
    """
    Decode a JSON object tree and reclassify every node by name.

    The expected shape is ``{"name": str, "children": [<same shape>...]}``.
    A top-level array is taken as the children of a synthetic root. Any
    ``isFile`` flag in the input is ignored.

    Args:
        text: Raw JSON text.

    Returns:
        FolderNode: The decoded tree.

    Raises:
        StructureDecodeError: If the text is not valid JSON, nests deeper
                              than the decoder supports, or has the wrong shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StructureDecodeError(str(e)) from e
    except RecursionError as e:
        raise StructureDecodeError("structure is nested too deeply to decode") from e

    if isinstance(data, list):
        data = {"name": ROOT_NAME, "children": data}

    root = _decode_tree(data)
    logger.debug(f"Decoded structured tree rooted at '{root.name}'")
    return root


def _decode_tree(data: Any) -> FolderNode:
    """Convert a decoded JSON value into a FolderNode tree without recursion."""
    root, raw_children = _decode_node(data, "$")
    pending: List[Tuple[FolderNode, List[Any], str]] = [(root, raw_children, "$")]

    while pending:
        parent, raw_children, location = pending.pop()
        for i, raw_child in enumerate(raw_children):
            child_location = f"{location}.children[{i}]"
            child, grandchildren = _decode_node(raw_child, child_location)
            parent.children.append(child)
            if grandchildren:
                pending.append((child, grandchildren, child_location))

    return root


def _decode_node(data: Any, location: str) -> Tuple[FolderNode, List[Any]]:
    """Validate one JSON object and return its node plus its raw children."""
    if not isinstance(data, dict):
        raise StructureDecodeError(
            f"expected an object at {location}, found {type(data).__name__}"
        )

    name = data.get("name")
    if not isinstance(name, str):
        raise StructureDecodeError(f"missing or non-string 'name' at {location}")
    if any(sep in name for sep in PATH_SEPARATORS):
        raise StructureDecodeError(f"name {name!r} contains a path separator at {location}")

    raw_children = data.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise StructureDecodeError(f"'children' must be a list at {location}")

    return FolderNode(name=name, is_file=is_file_name(name)), raw_children

# -----------------------------------------------------------------------------
# PATH LIST STRATEGY
# -----------------------------------------------------------------------------

def build_from_path_list(lines: Iterable[str]) -> FolderNode:
    """
    Build a tree from one slash-delimited path per line.

    A leading 'Assets' segment is dropped since every path is rooted at
    the implicit root. Only the last segment of a line may be a file.

    Args:
        lines: Raw input lines.

    Returns:
        FolderNode: The merged tree.
    """
    root = FolderNode(name=ROOT_NAME, is_file=False)

    for raw in lines:
        line = raw.split(COMMENT_MARKER, 1)[0].strip()
        if not line:
            continue

        parts = split_segments(line)
        if parts and parts[0].lower() == ROOT_NAME.lower():
            parts = parts[1:]
        if not parts:
            logger.debug(f"Skipping root-only line: {raw!r}")
            continue

        parent = root
        last = len(parts) - 1
        for i, part in enumerate(parts):
            parent = parent.get_or_add_child(part, i == last and is_file_name(part))

    return root

# -----------------------------------------------------------------------------
# INDENTED OUTLINE STRATEGY
# -----------------------------------------------------------------------------

def build_from_indented_outline(lines: Iterable[str]) -> FolderNode:
    """
    Rebuild parent/child relationships from indentation depth.

    Keeps a stack of (indent, node) pairs seeded with (-1, root). Each line
    pops every entry indented at least as deep as itself, attaches its
    segments under the remaining top, then pushes its deepest node. Only
    relative indentation matters, so sibling groups may use different
    widths.

    Args:
        lines: Raw outline lines.

    Returns:
        FolderNode: The merged tree.
    """
    root = FolderNode(name=ROOT_NAME, is_file=False)
    stack: List[Tuple[int, FolderNode]] = [(-1, root)]
    seen_content = False

    for raw in lines:
        content, indent = normalize_line(raw)
        if not content:
            logger.debug(f"Skipping decoration-only line: {raw!r}")
            continue

        parts = split_segments(content)
        if not parts:
            continue

        # The outline may restate the root on its first line
        if not seen_content:
            seen_content = True
            if len(parts) == 1 and parts[0].lower() == ROOT_NAME.lower():
                logger.debug("Root folder restated explicitly; skipping")
                continue

        while stack[-1][0] >= indent:
            stack.pop()
        parent = stack[-1][1]

        for part in parts:
            parent = parent.get_or_add_child(part, is_file_name(part))

        stack.append((indent, parent))

    return root
