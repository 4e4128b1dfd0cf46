from __future__ import annotations

"""
Smoke tests for the public package surface.

Ensures the facade modules import cleanly and expose the names used by
callers that do not reach into submodules.
"""

import foldersetup
import foldersetup.core.parsing as parsing


def test_top_level_api_contract() -> None:
    for name in foldersetup.__all__:
        assert hasattr(foldersetup, name), f"foldersetup missing: {name}"


def test_parsing_facade_contract() -> None:
    for name in parsing.__all__:
        assert hasattr(parsing, name), f"foldersetup.core.parsing missing: {name}"


def test_top_level_round_trip() -> None:
    root = foldersetup.parse_structure("Assets/Scenes/Main.unity")
    assert foldersetup.flatten(root) == foldersetup.parse_to_paths("Assets/Scenes/Main.unity")
    assert isinstance(root, foldersetup.FolderNode)
