"""
Logging configuration for the landing API.

Handlers are attached to the root logger once per process.  Logger
levels are applied on every call, so the ``caringiq_api`` loggers
follow ``DEBUG`` even when uvicorn or pytest configured the root logger
first.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "caringiq_api"

# One line per request from uvicorn and per call from the test client
# drowns out the submission log; keep them at WARNING unless debugging.
NOISY_LOGGERS = ("uvicorn.access", "httpx")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure logging for the service.

    Parameters
    ----------
    level : str
        Root level name, case insensitive.  Unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        Optional path of a file receiving the same records as the
        console.
    debug : bool
        Log the store's per‑record ``DEBUG`` lines and stop quieting
        access logs.
    """
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if debug else logging.NOTSET)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(_level_from_name(level))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
