from __future__ import annotations

"""
Unit tests for the Tree Flattener and workspace path helpers.
"""

from foldersetup.core.analysis.flattener import flatten, folder_paths, to_workspace_paths
from foldersetup.domain.tree_models import FolderNode


def make_tree() -> FolderNode:
    """
    Build a small tree by hand.

    Assets
      Art
        logo.png
      Code.cs        (file-looking name with children)
        Inner.cs
      empty
    """
    root = FolderNode("Assets")
    art = root.get_or_add_child("Art", False)
    art.get_or_add_child("logo.png", True)
    code = root.get_or_add_child("Code.cs", True)
    code.get_or_add_child("Inner.cs", True)
    root.get_or_add_child("empty", False)
    return root


def test_flatten_preorder_without_root() -> None:
    assert flatten(make_tree()) == [
        ("Art", False),
        ("Art/logo.png", True),
        ("Code.cs", False),
        ("Code.cs/Inner.cs", True),
        ("empty", False),
    ]


def test_flatten_empty_root() -> None:
    assert flatten(FolderNode("Assets")) == []


def test_workspace_paths_prefix_root() -> None:
    entries = [("Art", False), ("Art/logo.png", True)]
    assert to_workspace_paths(entries) == [("Assets/Art", False), ("Assets/Art/logo.png", True)]
    assert to_workspace_paths(entries, "Content") == [
        ("Content/Art", False),
        ("Content/Art/logo.png", True),
    ]


def test_folder_paths_distinct_in_order() -> None:
    entries = [("Art", False), ("Art/logo.png", True), ("Art", False), ("Audio", False)]
    assert folder_paths(entries) == ["Art", "Audio"]


def test_flatten_chain_deeper_than_recursion_limit() -> None:
    root = FolderNode("Assets")
    node = root
    for i in range(1500):
        node = node.get_or_add_child(f"d{i}", False)

    entries = flatten(root)

    assert len(entries) == 1500
    assert entries[-1][0].count("/") == 1499
