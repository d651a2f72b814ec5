"""Logging setup for the interpreter.

Modules only ask for loggers via get_logger(__name__); handlers are installed
once, by the command-line front-end.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from mal.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Install the root handler, unless one is already installed.

    Args:
        level: level name (DEBUG, INFO, WARNING, ERROR); defaults to MAL_LOG_LEVEL
        log_file: write here instead of stderr. Logs never go to stdout, where
            the REPL prints values.
    """
    name = (level or get_log_level()).upper()
    if logging.getLogger().handlers:
        return

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
        handlers=[handler],
    )
    get_logger(__name__).info("Logging at %s", name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
