"""Logging setup for the fruits catalog service."""

import logging
import sys

from .config import LOG_LEVEL

_configured = False


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Attach a stderr handler to the root logger once."""
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(handler)

    _configured = True
