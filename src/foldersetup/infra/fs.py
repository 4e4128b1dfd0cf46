from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Small helpers for reading structure descriptions and preparing log
destinations.
"""

import os
import sys
from typing import Optional

# utf-8-sig drops the BOM some editors prepend to text files
STRUCTURE_FILE_ENCODING = "utf-8-sig"


def read_structure_text(path: Optional[str]) -> str:
    """
    Read a structure description from a file, or from stdin when path is '-' or None.

    Args:
        path: File path to read, '-' or None for standard input.

    Returns:
        str: The raw text.

    Raises:
        OSError: If the file cannot be read.
    """
    if not path or path == "-":
        return sys.stdin.read()

    with open(path, "r", encoding=STRUCTURE_FILE_ENCODING) as f:
        return f.read()


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file if missing.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
