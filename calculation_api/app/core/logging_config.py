"""
Logging configuration for the Calculation API.

Everything this package logs goes through loggers below
``calculation_api``, so ``setup_logging`` configures that logger rather
than the root logger.  A host that already set up root logging (an
ASGI server, pytest) keeps its own handlers, and records still
propagate to them.

The level comes from ``Settings.log_level`` and is applied on every
call, so rebuilding the app with different settings changes the level
without stacking extra handlers.  ``normalize_level`` is shared with
``run.py`` so Uvicorn and the application agree on the level.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "calculation_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "calculation_api.console"
FILE_HANDLER_NAME = "calculation_api.file"

# Names accepted by both ``logging`` and Uvicorn's ``log_level``.
_LEVEL_ALIASES = {
    "critical": "critical",
    "fatal": "critical",
    "error": "error",
    "warning": "warning",
    "warn": "warning",
    "info": "info",
    "debug": "debug",
}


def normalize_level(level: Optional[str]) -> str:
    """Return a lower-case level name, ``"info"`` for anything unknown."""
    return _LEVEL_ALIASES.get((level or "").strip().lower(), "info")


def _find_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``calculation_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"info"``).  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  A file handler is added
        once per path; an existing file handler for another path is
        replaced.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(normalize_level(level).upper())

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _find_handler(logger, CONSOLE_HANDLER_NAME) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = str(Path(logfile).resolve())
        current = _find_handler(logger, FILE_HANDLER_NAME)
        if current is not None and getattr(current, "baseFilename", None) != log_path:
            logger.removeHandler(current)
            current.close()
            current = None
        if current is None:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(FILE_HANDLER_NAME)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
