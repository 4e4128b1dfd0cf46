from __future__ import annotations

"""
Logging Configuration Models.

Holds the settings the CLI bootstrap passes to ``configure_logging`` and
the fixed record layouts used by the console and file handlers.
"""

import logging
from dataclasses import dataclass
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Log files roll over at 1 MB, keeping three archives
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Minimum severity name ("DEBUG", "INFO", ...).
        console: Whether records go to stderr.
        log_file: Optional rotating log file path.
        max_bytes: Rollover threshold for the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = LOG_FILE_MAX_BYTES

    @property
    def level_int(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
