from __future__ import annotations

"""
Unit tests for the Structure Parsing Service.

Verifies format dispatch end to end, CRLF handling, error propagation and
the round trip through a re-expressed path list.
"""

import pytest

from foldersetup.core.analysis.flattener import flatten, to_workspace_paths
from foldersetup.core.parsing.builders import build_from_path_list
from foldersetup.core.parsing.service import parse_structure, parse_to_paths
from foldersetup.domain.errors import EmptyInputError, StructureDecodeError


def test_dispatch_outline(bullet_outline: str) -> None:
    assert parse_to_paths(bullet_outline) == [
        ("Art", False),
        ("Scenes", False),
        ("Scenes/00_gym.unity", True),
    ]


def test_dispatch_path_list() -> None:
    text = "Assets/Prefabs/Player.prefab\nAssets/Prefabs/Enemy.prefab\n"
    assert parse_to_paths(text) == [
        ("Prefabs", False),
        ("Prefabs/Player.prefab", True),
        ("Prefabs/Enemy.prefab", True),
    ]


def test_dispatch_structured() -> None:
    root = parse_structure('{"name": "Assets", "children": [{"name": "Main.unity"}]}')
    assert flatten(root) == [("Main.unity", True)]


def test_crlf_input() -> None:
    assert parse_to_paths("Assets\r\n- Art\r\n  - logo.png\r\n") == [
        ("Art", False),
        ("Art/logo.png", True),
    ]


def test_empty_input_raises() -> None:
    with pytest.raises(EmptyInputError):
        parse_structure("  \n ")


def test_malformed_structured_raises() -> None:
    with pytest.raises(StructureDecodeError):
        parse_structure("{ not json")


def test_reparse_as_path_list_is_idempotent(box_drawing_outline: str) -> None:
    """Flattened output re-expressed as a path list flattens identically."""
    entries = parse_to_paths(box_drawing_outline)
    lines = [path for path, _ in to_workspace_paths(entries)]
    # Repeated lines merge
    lines += lines[:3]

    assert flatten(build_from_path_list(lines)) == entries


def test_parse_logs_selected_format(caplog: pytest.LogCaptureFixture, bullet_outline: str) -> None:
    with caplog.at_level("INFO", logger="foldersetup.core.parsing.service"):
        parse_structure(bullet_outline)

    assert "indented_outline" in caplog.text


def test_path_line_deeper_than_recursion_limit() -> None:
    segments = [f"d{i}" for i in range(1200)]
    entries = parse_to_paths("Assets/" + "/".join(segments) + "/x.txt")

    assert len(entries) == 1201
    assert entries[0] == ("d0", False)
    assert entries[-1] == ("/".join(segments) + "/x.txt", True)
