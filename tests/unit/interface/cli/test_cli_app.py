from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs ``main`` in-process with file and stdin input and checks the report
rendering and exit codes.
"""

import io
import json
import logging
from pathlib import Path

import pytest

from foldersetup.infra.logging import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from foldersetup.interface.cli.app import main


@pytest.fixture(autouse=True)
def reset_logging(capsys):
    """Tear down the handlers main() attaches so tests stay isolated."""
    yield
    root = logging.getLogger()
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
    for h in list(root.handlers):
        if getattr(h, "_foldersetup_handler", False):
            root.removeHandler(h)
            h.close()
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


@pytest.fixture
def structure_file(tmp_path: Path, bullet_outline: str) -> Path:
    path = tmp_path / "structure.txt"
    path.write_text(bullet_outline, encoding="utf-8")
    return path


def test_paths_report(structure_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(structure_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["Art/", "Scenes/", "Scenes/00_gym.unity"]


def test_json_report_with_root(structure_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(structure_file), "--json", "--include-root"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"path": "Assets/Art", "is_file": False},
        {"path": "Assets/Scenes", "is_file": False},
        {"path": "Assets/Scenes/00_gym.unity", "is_file": True},
    ]


def test_folders_only_report(structure_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(structure_file), "--folders-only"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Art/", "Scenes/"]


def test_tree_report_from_stdin(
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("Assets/Art/logo.png\nAssets/Audio\n"))

    assert main(["--format", "tree"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Assets",
        "├── Art/",
        "│   └── logo.png",
        "└── Audio/",
    ]


def test_sample_structure(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--sample"]) == 0
    assert "Scenes/00_gym.unity" in capsys.readouterr().out.splitlines()


def test_bom_is_ignored(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bom.json"
    path.write_text('{"name": "Assets", "children": [{"name": "Art"}]}', encoding="utf-8-sig")

    assert main(["-i", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Art/"]


def test_missing_file_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(tmp_path / "nope.txt")]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_empty_input_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("   \n", encoding="utf-8")

    assert main(["-i", str(path)]) == 2
    assert "Empty structure text." in capsys.readouterr().err


def test_malformed_json_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"name": "Assets", ', encoding="utf-8")

    assert main(["-i", str(path)]) == 2
    assert "Invalid structured input" in capsys.readouterr().err
