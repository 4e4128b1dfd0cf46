from __future__ import annotations

"""
File Kind Heuristic.

Guesses whether a bare segment name denotes a file or a folder from its
extension alone. Structural evidence (a node gaining children) overrides
this guess toward "folder", never the other way around.
"""

from foldersetup.domain.constants import FILE_EXTENSIONS


def is_file_name(name: str) -> bool:
    """
    Check whether a segment name ends with a recognized file extension.

    Args:
        name: Raw segment name.

    Returns:
        bool: True if the name looks like a file.
    """
    lower = name.strip().lower()
    return lower.endswith(FILE_EXTENSIONS)
