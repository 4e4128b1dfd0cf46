from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node type produced by the structure parser and consumed by
the flattener and renderer. Each node owns its children outright; the
tree carries no back references because traversal is always top-down.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# (path, is_file) pair emitted by the flattener
FlatEntry = Tuple[str, bool]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FolderNode:
    """
    Represents a single path segment (folder or file) in the parsed tree.

    Attributes:
        name: Segment name as typed, without separators or decorations.
        is_file: Heuristic classification fixed at creation time.
        children: Ordered child nodes owned by this node.
    """
    name: str
    is_file: bool = False
    children: List["FolderNode"] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        """A node with children is a folder whatever its name suggests."""
        return bool(self.children) or not self.is_file

    def find_child(self, name: str) -> Optional["FolderNode"]:
        """Return the child with exactly this name, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def get_or_add_child(self, name: str, is_file: bool) -> "FolderNode":
        """
        Reuse an existing child with the same name or append a new one.

        The first occurrence keeps its classification; later occurrences
        merge into it.

        Args:
            name: Segment name of the child.
            is_file: Classification used only when a new node is created.

        Returns:
            FolderNode: The existing or newly created child.
        """
        existing = self.find_child(name)
        if existing is not None:
            return existing

        node = FolderNode(name=name, is_file=is_file)
        self.children.append(node)
        return node
