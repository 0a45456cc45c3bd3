"""
script_gate/core/logger.py

Centralised logging configuration.
Every module should obtain its logger via:

    from script_gate.core.logger import get_logger
    logger = get_logger(__name__)

Gate rejections log the offending value, which the client chose. The
formatter escapes control characters so every rejection stays exactly
one line on stdout, whatever the client sent.
"""

import logging
import sys

from script_gate.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# C0 controls and DEL → \xNN; CR, LF and TAB get their usual short escapes.
_ESCAPES = {i: f"\\x{i:02x}" for i in (*range(0x20), 0x7F)}
_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"})


class SingleLineFormatter(logging.Formatter):
    """Formatter that never lets a record span more than one line."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.message = record.message.translate(_ESCAPES)
        return super().formatMessage(record)


def _build_handler() -> logging.StreamHandler:
    """Return a stdout handler writing one line per record."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    handler.setFormatter(SingleLineFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _configure_root_logger() -> None:
    """Configure the root logger once at import time."""
    root = logging.getLogger()
    if root.handlers:
        # Already configured (e.g. by a test framework) — leave it alone.
        return

    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    root.addHandler(_build_handler())

    # Gate log lines already cover every request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger.

    Usage
    -----
    >>> logger = get_logger(__name__)
    >>> logger.warning("Forbidden IP: %s", client_host)
    """
    return logging.getLogger(name)
