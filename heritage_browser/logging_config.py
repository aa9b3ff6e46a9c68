from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "HERITAGE_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "HERITAGE_BROWSER_LOG_LEVEL"
LOG_FORMATS = ("json", "plain")

_LINE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty third-party loggers, capped at WARNING unless the app itself runs at DEBUG
_NOISY_LOGGERS = ("werkzeug", "urllib3")


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def _resolve_format(force_format: Optional[str]) -> str:
    format_mode = (force_format or os.getenv(LOG_FORMAT_ENV, "json")).strip().lower()
    if format_mode not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {format_mode!r}, expected one of {LOG_FORMATS}")
    return format_mode


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format: force_format, else HERITAGE_BROWSER_LOG_FORMAT, else "json".
    JSON lines carry the `extra={...}` fields the modules log with
    (view_id, n_sites, criteria, ...); "plain" is for local development.

    Level: the argument (int or name), else HERITAGE_BROWSER_LOG_LEVEL, else INFO.

    :raises ValueError: on an unknown format or level name
    """
    root_level = _resolve_level(level)
    format_mode = _resolve_format(force_format)

    if format_mode == "plain":
        formatter = logging.Formatter(_LINE_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(_LINE_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(root_level)
    # Dash debug reloads call this twice; never stack handlers
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
