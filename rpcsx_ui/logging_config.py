from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List

_LOG_INITIALIZED = False

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = os.getenv("RPCSX_UI_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        return LEVEL_MAP.get(level.upper(), logging.INFO)
    return level


def _build_handlers(log_file: str | Path | None) -> List[logging.Handler]:
    """Console handler, plus a file handler when a log file is configured.

    The file's directory is created on demand. ``RPCSX_UI_LOG_FILE`` supplies
    the path when none is passed.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is None:
        log_file = os.getenv("RPCSX_UI_LOG_FILE") or None
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def init_logging(level: str | int = None, log_file: str | Path | None = None) -> None:
    global _LOG_INITIALIZED
    if _LOG_INITIALIZED:
        return
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        handlers=_build_handlers(log_file),
    )
    _LOG_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    if not _LOG_INITIALIZED:
        init_logging()
    return logging.getLogger(name)
