from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI controller and makes sure any unhandled
exception is logged before the process exits.
"""

import logging
import os
import sys
import traceback
from typing import Any

# Make 'src' importable when this file is run directly
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception with its full trace and exit with status 1.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("foldersetup.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("CRITICAL ERROR (FOLDERSETUP CLI)", file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


sys.excepthook = global_exception_handler


def main() -> int:
    """
    Delegate to the CLI controller.

    Returns:
        int: Standard process exit code.
    """
    from foldersetup.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
