from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into domain-compatible configuration overrides.
"""

import argparse
from typing import Any, Dict

from foldersetup.domain.config import OUTPUT_FORMATS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FolderSetup CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldersetup",
        description=(
            "Parse a folder structure description (JSON tree, path list or "
            "indented outline) and print the folders and files it defines."
        ),
    )

    # --- Input ---
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Structure file to read. Reads stdin when omitted or '-'.",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Parse the built-in sample structure instead of reading input.",
    )

    # --- Report rendering ---
    p.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Report style: flat path list, JSON entries, or ASCII tree preview.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Shortcut for --format json.",
    )
    p.add_argument(
        "--include-root",
        action="store_true",
        help="Prefix every path with the root folder name (Assets/...).",
    )
    p.add_argument(
        "--folders-only",
        action="store_true",
        help="Report folders only, skipping files.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["output_format"] = args.output_format
    if args.json_output:
        overrides["output_format"] = "json"

    if args.include_root:
        overrides["include_root"] = True
    if args.folders_only:
        overrides["folders_only"] = True

    if args.debug:
        overrides["log_level"] = "DEBUG"
    overrides["log_file"] = args.log_file

    return overrides
