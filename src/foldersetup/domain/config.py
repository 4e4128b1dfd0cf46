from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration consumed by the interface layers.
Settings are plain dictionaries so they can be merged with command-line
overrides and validated in a single pass.
"""

from typing import Any, Dict, Tuple

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
OUTPUT_FORMATS: Tuple[str, ...] = ("paths", "json", "tree")
DEFAULT_OUTPUT_FORMAT = "paths"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Report rendering
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "include_root": False,
        "folders_only": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }
