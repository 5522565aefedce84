"""Logging for the Streamlit pages and the modules behind them.

Streamlit re-executes every page script on each interaction and reloads
package modules when their source changes, so module-level flags do not
survive.  The handler installed here is found again by name on the
``budget_dashboard`` logger instead, which keeps ``configure_logging``
safe to call at the top of every page.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "budget_dashboard"
_HANDLER_NAME = "budget_dashboard.console"
_LEVEL_ENV = "BUDGET_DASHBOARD_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Per-request lines from urllib3 repeat the gateway's own debug output.
_QUIET_LOGGERS = ("urllib3",)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(_LEVEL_ENV) or logging.INFO
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> logging.Logger:
    """Attach the console handler to the package logger, once per process.

    Later calls with an explicit ``level`` only change the level; the
    handler and its stream stay as first configured.  With no ``level`` the
    value of ``BUDGET_DASHBOARD_LOG_LEVEL`` is used, defaulting to INFO.
    """
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    handler = _console_handler(logger)
    if handler is not None:
        if level is not None:
            resolved = _resolve_level(level)
            logger.setLevel(resolved)
            handler.setLevel(resolved)
        return logger

    for existing in list(logger.handlers):
        if isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    # Streamlit installs its own root handlers; keep our lines from doubling.
    logger.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module or page, silent until ``configure_logging`` runs."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
