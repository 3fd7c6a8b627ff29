"""
Logging utilities for the payments dashboard.

Every module logger is a child of the ``payments_ui`` package logger, which
owns the one console handler. Module loggers only name the source.
"""

import logging
from pathlib import Path

from payments_ui import config

ROOT_NAME = "payments_ui"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        root.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module.

    Args:
        name: ``__file__`` of the calling module, or a plain name. Files are
            named by their path inside the package, so ``models/session.py``
            logs as ``payments_ui.models.session``.
    """
    _root()
    path = Path(name)
    if path.suffix == ".py":
        parts = list(path.with_suffix("").parts)
        if ROOT_NAME in parts:
            package_index = len(parts) - 1 - parts[::-1].index(ROOT_NAME)
            parts = parts[package_index + 1 :]
        else:
            parts = parts[-1:]
        if parts and parts[-1] == "__init__":
            parts.pop()
        name = ".".join(parts)
    return logging.getLogger(f"{ROOT_NAME}.{name}" if name else ROOT_NAME)
