from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler on the root logger and written by a
QueueListener thread, so file I/O never blocks the analysis.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from sizetree.infra.logging.config import (
    CONSOLE_FORMAT,
    FILE_DATE_FORMAT,
    FILE_FORMAT,
    LoggingConfig,
)
from sizetree.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_sizetree_configured"
_QUEUE_LISTENER_ATTR: str = "_sizetree_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking queue-based I/O.

    Repeated calls are no-ops unless force is set, in which case the
    handlers installed by a previous call are detached and replaced.

    Args:
        cfg: Structural configuration for the logging system.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = cfg.level_value
    root.setLevel(level_int)
    reset_logging()

    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.append(
            _create_console_handler(level_int, logging.Formatter(CONSOLE_FORMAT))
        )

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT),
            cfg.max_bytes,
            cfg.backup_count,
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

    atexit.register(_safe_stop_listener, listener)
    return root


def reset_logging() -> None:
    """Detach our handlers, stop the listener and clear the configured flag."""
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
