from __future__ import annotations

"""
Tree Renderer.

Converts a parsed FolderNode tree into an ASCII preview. The output uses
box-drawing connectors and is itself valid outline input for the parser.
"""

from typing import List, Tuple

from foldersetup.domain.constants import ROOT_NAME
from foldersetup.domain.tree_models import FolderNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: FolderNode) -> List[str]:
    """
    Render a full tree under the conventional root line.

    The root is synthetic and never part of an emitted path, so the first
    line is always ROOT_NAME whatever the decoded root was called.

    Args:
        root: Root of the parsed tree.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [ROOT_NAME]
    render_tree_structure(root, lines, prefix="")
    return lines


def render_tree_structure(node: FolderNode, lines: List[str], prefix: str = "") -> None:
    """
    Append the descendants of a node as connector lines.

    Uses standard ASCII connectors (├──, └──) and suffixes folders with
    '/' so empty folders stay distinguishable from extensionless files.
    Each stack entry carries the prefix of its level and whether it is
    the last of its siblings.

    Args:
        node: Node whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the first rendered level.
    """
    stack: List[Tuple[FolderNode, str, bool]] = _child_frames(node, prefix)

    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        label = f"{child.name}/" if child.is_folder else child.name

        lines.append(f"{child_prefix}{connector}{label}")

        if child.children:
            new_prefix = child_prefix + ("    " if is_last else "│   ")
            stack.extend(_child_frames(child, new_prefix))


def _child_frames(node: FolderNode, prefix: str) -> List[Tuple[FolderNode, str, bool]]:
    """Stack frames for a node's children, reversed so they pop in order."""
    last = len(node.children) - 1
    return [(child, prefix, i == last) for i, child in reversed(list(enumerate(node.children)))]
