from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "orrery"


def get_logger(name: Optional[str] = None, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """
    Return a logger for orrery code.

    - If a logger is provided, use it.
    - Otherwise use the package logger "orrery", or a child of it when name is given
      (module names such as "orrery.registry" map onto the same tree).
    - If the package logger has no handlers, attach a StreamHandler with a compact formatter.
    - Default level is INFO.
    """
    if logger is not None:
        return logger
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    if not name or name == PACKAGE_LOGGER:
        return root
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Set the package log level from a name such as "DEBUG"."""
    get_logger().setLevel(level.upper())
