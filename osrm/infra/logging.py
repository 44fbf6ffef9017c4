# osrm/infra/logging.py
# -*- coding: utf-8 -*-

"""
Logging setup for the OSRM client.

Library modules only call `get_logger(__name__)`. The route CLI is the one
place that calls `init_logging()`, optionally mirroring records to a file
chosen with `--log-file`.

Environment
-----------
- OSRM_LOG_LEVEL, if set, wins over the `level` argument.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import IO, Optional, Union

# ────────────────────────────────────────────────────────────────────────────────
# Format
# ────────────────────────────────────────────────────────────────────────────────

# [YYYY-MM-DD HH:MM:SS][LEVEL][logger.name] message
_FORMATTER = logging.Formatter(
      fmt="[{asctime}][{levelname}][{name}] {message}"
    , datefmt="%Y-%m-%d %H:%M:%S"
    , style="{"
)

_LIBRARY_LOGGER = "osrm"


def _resolve_level(level: str) -> int:
    name = os.getenv("OSRM_LOG_LEVEL") or level
    resolved = logging.getLevelName(str(name).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _attach(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(_FORMATTER)
    root.addHandler(handler)


# ────────────────────────────────────────────────────────────────────────────────
# Public API
# ────────────────────────────────────────────────────────────────────────────────

def init_logging(
      level: str = "INFO"
    , *
    , log_file: Optional[Union[str, Path]] = None
    , stream: Optional[IO[str]] = None
) -> Optional[Path]:
    """
    Replace the root handlers with a console handler (stderr by default, so
    JSON printed on stdout stays clean) and, when `log_file` is given, a UTF-8
    file handler. Returns the resolved log file path, or None.
    """
    numeric_level = _resolve_level(level)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.setLevel(numeric_level)

    _attach(root, logging.StreamHandler(stream=stream or sys.stderr))

    path: Optional[Path] = None
    if log_file is not None:
        path = Path(log_file).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(root, logging.FileHandler(path, encoding="utf-8"))

    get_logger(__name__).debug(
        "Logging configured (level=%s, file=%s)", logging.getLevelName(numeric_level), path
    )
    return path


def log_banner(
      log: logging.Logger
    , msg: str
    , *
    , char: str = "="
    , width: int = 60
) -> None:
    """Log `msg` between two bars of `char`."""
    bar = char * width
    log.info(bar)
    log.info(msg)
    log.info(bar)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name is not None else _LIBRARY_LOGGER)
