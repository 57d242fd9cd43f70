"""Centralized logging configuration and structured-context helpers."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

_CONTEXT_KEYS = ("event", "component", "action", "outcome", "package_manager", "target")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the process.

    The level comes from ``level`` when given, else from the
    ``DEPSYNC_LOG_LEVEL`` environment variable, else INFO.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not any(getattr(h, "_depsync_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        handler._depsync_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level_value)


def add_file_handler(log_file: str) -> logging.Handler:
    """Attach a file handler with timestamps to the root logger."""
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
    logging.getLogger().addHandler(file_handler)
    return file_handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records.

    None values are dropped. Well-known keys are passed through as record
    attributes; anything else is grouped under ``context``.
    """
    extra: Dict[str, Any] = {}
    context: Dict[str, Any] = {}
    for key, value in kwargs.items():
        if value is None:
            continue
        if key in _CONTEXT_KEYS:
            extra[key] = value
        else:
            context[key] = value
    if context:
        extra["context"] = context
    return extra
