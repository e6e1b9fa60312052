"""Centralized logging helpers for rasp operations and the CLI."""

from __future__ import annotations

import logging
import os
import sys

_configured = False


def _resolve_level() -> int:
    raw = os.environ.get("RASP_LOG_LEVEL", "").strip().upper()
    if raw:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def configure_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set rasp.* logger levels from CLI flags. --quiet/--verbose override env."""
    global _configured
    env_level = _resolve_level()
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = env_level
    root = logging.getLogger("rasp")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(h)
        root.propagate = False
    for child in ("versioning", "archiving", "cli"):
        logging.getLogger(f"rasp.{child}").setLevel(logging.NOTSET)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the rasp tree; handlers live on the rasp root."""
    logger = logging.getLogger(f"rasp.{name}")
    if not _configured:
        root = logging.getLogger("rasp")
        if root.level == logging.NOTSET:
            root.setLevel(_resolve_level())
    return logger
