from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
routed through a QueueHandler/QueueListener pair so file writes never
happen on the calling thread.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from foldersetup.infra.logging.config import (
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LOG_FILE_BACKUPS,
    LoggingConfig,
)
from foldersetup.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_foldersetup_configured"
_QUEUE_LISTENER_ATTR: str = "_foldersetup_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking queue-based I/O.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    previously attached handlers and listener are torn down first.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = cfg.level_int
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
                cfg.max_bytes,
                LOG_FILE_BACKUPS,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

        queue_handler = QueueHandler(log_queue)
        _tag_handler(queue_handler)

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()

        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)

        return root

    # Emergency console logging if the queue infrastructure cannot start
    except (OSError, RuntimeError, ValueError) as e:
        _remove_our_handlers(root)

        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("CRITICAL FALLBACK | %(levelname)s | %(message)s"))
        _tag_handler(sh)
        root.addHandler(sh)

        root.warning(f"Logging setup failed ({e}). Switched to emergency console.")
        return root


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every internally managed handler on the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    """Terminate the current QueueListener, if any, to reset state."""
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    ``QueueListener.stop`` fails if its thread has already been joined,
    which happens when tests reset logging before the atexit hook runs.
    """
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
