from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults plus command-line overrides), parsing of the structure text and
rendering of the resulting report.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from foldersetup.core.analysis.flattener import flatten, folder_paths, to_workspace_paths
from foldersetup.core.analysis.tree_renderer import render_tree
from foldersetup.core.parsing.service import parse_structure
from foldersetup.core.validator import validate_config
from foldersetup.domain.config import get_default_config
from foldersetup.domain.constants import DEFAULT_STRUCTURE
from foldersetup.domain.errors import StructureParseError
from foldersetup.domain.tree_models import FlatEntry, FolderNode
from foldersetup.infra.fs import read_structure_text
from foldersetup.infra.logging import LoggingConfig, configure_logging, get_logger
from foldersetup.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 unexpected failure,
             2 input or parse error, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf["log_file"] or None,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Input acquisition
    try:
        if args.sample:
            text = DEFAULT_STRUCTURE
        else:
            text = read_structure_text(args.input_path)
    except OSError as e:
        logger.error(f"Cannot read structure input: {e}")
        print(f"ERROR: Cannot read '{args.input_path}': {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Parsing phase
    try:
        root = parse_structure(text)
    except StructureParseError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.critical(f"Unexpected failure while parsing: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    print("\n".join(render_report(root, conf)))
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of override values into the base configuration.

    Only known keys with non-None values are merged.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def render_report(root: FolderNode, conf: Dict[str, Any]) -> List[str]:
    """
    Turn a parsed tree into output lines according to the configuration.

    Args:
        root: Parsed tree.
        conf: Validated configuration.

    Returns:
        List[str]: Lines to print.
    """
    if conf["output_format"] == "tree":
        return render_tree(root)

    entries: List[FlatEntry] = flatten(root)
    if conf["include_root"]:
        entries = to_workspace_paths(entries, root.name)
    if conf["folders_only"]:
        entries = [(path, False) for path in folder_paths(entries)]

    if conf["output_format"] == "json":
        payload = [{"path": path, "is_file": is_file} for path, is_file in entries]
        return [json.dumps(payload, ensure_ascii=False, indent=2)]

    return [f"{path}{'' if is_file else '/'}" for path, is_file in entries]
