from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared structure samples used across unit and e2e tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def bullet_outline() -> str:
    """Outline with an explicit root line and dash bullets."""
    return (
        "Assets\n"
        "- Art\n"
        "- Scenes\n"
        "  - 00_gym.unity\n"
    )


@pytest.fixture
def box_drawing_outline() -> str:
    """Outline in the style printed by the 'tree' command, with comments."""
    return (
        "Assets/\n"
        "├── Scenes/              # all scenes\n"
        "│   ├── Intro.unity\n"
        "│   └── Main.unity       ← entry point\n"
        "├── Scripts/\n"
        "│   └── Player/\n"
        "│       └── PlayerController.cs\n"
        "└── README.md\n"
    )


@pytest.fixture
def path_list_text() -> str:
    """Path-per-line input with mixed separators and a comment."""
    return (
        "Assets/Prefabs/Player.prefab\n"
        "Assets\\Prefabs\\Enemy.prefab   # hostile\n"
        "Assets/Scenes/Main.unity\n"
    )
