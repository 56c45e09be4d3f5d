from __future__ import annotations

"""
Logging Core Orchestrator.

Installs a single queue-backed handler on the root logger so that writing
log records (to stderr or a rotating file) never happens on the thread
doing the enumeration. Configuration is idempotent: repeated calls are
no-ops unless a re-configuration is forced.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from resutil.infra.logging.config import LoggingConfig
from resutil.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Root logger attributes tracking our lifecycle
_CONFIGURED_FLAG_ATTR: str = "_resutil_configured"
_QUEUE_LISTENER_ATTR: str = "_resutil_queue_listener"

# Set once the exit hook that drains the active listener is installed
_EXIT_HOOK_INSTALLED: bool = False


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger with a non-blocking queue architecture.

    Args:
        cfg: Logging configuration.
        force: Re-install handlers even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    # 1. Idempotency check
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = cfg.level_number
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    # 2. Sink handlers
    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)

    if not sinks:
        return root

    # 3. Queue-based orchestration
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = _tag_handler(QueueHandler(log_queue))

    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    # Flush pending records at interpreter exit, whichever listener is active then
    _install_exit_hook()

    return root


def shutdown_logging() -> None:
    """Flush and detach everything configure_logging installed."""
    root = logging.getLogger()
    _remove_our_handlers(root)
    _stop_existing_listener(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _install_exit_hook() -> None:
    global _EXIT_HOOK_INSTALLED
    if _EXIT_HOOK_INSTALLED:
        return
    atexit.register(_stop_existing_listener, logging.getLogger())
    _EXIT_HOOK_INSTALLED = True


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    # QueueListener.stop() fails on a listener whose thread was already joined
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
