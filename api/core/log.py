"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import sys

from core import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    """
    Attach one stdout handler to the root logger and set its level.

    Safe to call more than once; later calls only adjust the level.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(level or settings.log_level())
    if _handler is not None:
        return

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(_handler)
