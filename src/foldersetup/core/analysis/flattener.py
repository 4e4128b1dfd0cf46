from __future__ import annotations

"""
Tree Flattener.

Walks a parsed tree depth-first and emits the ordered (path, is_file)
list consumed by the workspace materialization layer. The walk keeps an
explicit stack so tree depth is bounded only by memory.
"""

from typing import List, Tuple

from foldersetup.domain.constants import ROOT_NAME
from foldersetup.domain.tree_models import FlatEntry, FolderNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten(root: FolderNode) -> List[FlatEntry]:
    """
    Flatten a tree into root-relative paths, pre-order, insertion order.

    The root itself is never emitted. A node with children is always
    reported as a folder.

    Args:
        root: Root of the parsed tree.

    Returns:
        List[FlatEntry]: Ordered (path, is_file) pairs.
    """
    entries: List[FlatEntry] = []
    # Children are pushed reversed so they pop in insertion order
    stack: List[Tuple[FolderNode, str]] = [(child, "") for child in reversed(root.children)]

    while stack:
        node, parent_path = stack.pop()
        here = f"{parent_path}/{node.name}" if parent_path else node.name
        entries.append((here, not node.is_folder))
        stack.extend((child, here) for child in reversed(node.children))

    return entries


def to_workspace_paths(entries: List[FlatEntry], root_name: str = ROOT_NAME) -> List[FlatEntry]:
    """Prefix every flattened path with the root folder name."""
    return [(f"{root_name}/{path}", is_file) for path, is_file in entries]


def folder_paths(entries: List[FlatEntry]) -> List[str]:
    """Return the distinct folder paths in their original order."""
    seen = set()
    folders: List[str] = []
    for path, is_file in entries:
        if is_file or path in seen:
            continue
        seen.add(path)
        folders.append(path)
    return folders
