"""
Text sinks for composed log lines.

Any object with an `info(str)` method is a sink; a stdlib `logging.Logger`
is the default.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Protocol, runtime_checkable

from log_method.settings import get_settings


DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


@runtime_checkable
class Sink(Protocol):
    def info(self, message: str) -> None:
        ...


def default_sink() -> logging.Logger:
    return logging.getLogger(get_settings().logger_name)


def _resolve_level(level: str | int | None) -> str | int:
    if level is None:
        level = os.getenv("LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        return level.strip().upper()
    return level


def init_logging(*, level: str | int | None = None, fmt: str | None = None) -> None:
    """
    Send root logging to stdout as plain text lines.

    `level` accepts a name in any case ("debug", "INFO") or a numeric level;
    when omitted, LOG_LEVEL is used, then INFO. Calling again replaces the
    previous handler.
    """
    lvl = _resolve_level(level)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(lvl)
    logging.captureWarnings(True)
