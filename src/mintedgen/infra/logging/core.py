from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records go
through a QueueHandler on the root logger and are written by a
QueueListener, so file I/O never happens on the calling thread.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from mintedgen.infra.logging.config import _LEVEL_MAP, LoggingConfig
from mintedgen.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_mintedgen_configured"
_QUEUE_LISTENER_ATTR: str = "_mintedgen_queue_listener"
_FALLBACK_FMT: str = "CRITICAL FALLBACK | %(levelname)s | %(message)s"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, using non-blocking queue-based I/O.

    Repeated calls are no-ops unless `force` is set, in which case our own
    handlers and listener are torn down and rebuilt.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The initialized root logger instance.
    """
    root = logging.getLogger()

    try:
        already_configured = bool(getattr(root, _CONFIGURED_FLAG_ATTR, False))
        if already_configured and not force:
            return root

        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []

        if cfg.console:
            sh = logging.StreamHandler(sys.stderr)
            sh.setLevel(level_int)
            sh.setFormatter(logging.Formatter(cfg.console_fmt))
            _tag_handler(sh)
            handlers_list.append(sh)

        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
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

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)

        return root

    # Emergency console logging if the queue infrastructure cannot be built
    except Exception:
        return _attach_fallback_handler(root)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Stop the listener (flushing queued records) and detach our handlers."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        setattr(root, _CONFIGURED_FLAG_ATTR, False)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every internally-managed handler on the root."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            _safe_close_handler(h)


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener and release the handlers it fed.

    QueueListener.stop() fails on a second call once its thread is gone,
    which happens when atexit runs after an explicit shutdown. The console
    stream may also be closed by then (interpreter exit, captured stderr).
    """
    if not listener:
        return

    try:
        if getattr(listener, "_thread", None) is not None:
            listener.stop()
    except (AttributeError, RuntimeError):
        pass

    for handler in listener.handlers:
        _safe_close_handler(handler)


def _safe_close_handler(handler: logging.Handler) -> None:
    """Close a handler whose underlying stream may already be gone."""
    try:
        handler.close()
    except (OSError, ValueError):
        pass


def _attach_fallback_handler(root: logging.Logger) -> logging.Logger:
    """Replace our handlers with a bare stderr handler and report the switch."""
    _remove_our_handlers(root)
    _stop_existing_listener(root)
    root.setLevel(logging.INFO)

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(logging.Formatter(_FALLBACK_FMT))
    _tag_handler(sh)
    root.addHandler(sh)

    root.warning("Diagnostic infrastructure failed. Switched to emergency console.")
    return root
