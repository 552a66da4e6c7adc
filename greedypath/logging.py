"""Logging for greedypath.

All package loggers hang off the ``greedypath`` logger, which owns a single
handler writing to standard error. Standard output is reserved for command
results, so diagnostics never mix with a printed path or JSON document.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "greedypath"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler_installed = False


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to the current ``sys.stderr``.

    The stream is looked up on every record rather than bound at import, so
    redirecting ``sys.stderr`` (pytest's ``capsys``, ``contextlib.redirect_stderr``)
    also redirects package logs.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler on the ``greedypath`` logger.

    Does nothing if a handler is already installed; call ``reset_logging()``
    first to replace it.

    Args:
        level: Level for the ``greedypath`` logger.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a `StderrHandler`.
    """
    global _handler_installed

    if _handler_installed:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler if handler is not None else StderrHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the Python root logger
    root_logger.propagate = True

    _handler_installed = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` that defers its level to ``greedypath``."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``greedypath`` logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def cli_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` flags to a level.

    ``verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply the level selected by the CLI flags and return it."""
    level = cli_log_level(verbose, quiet)
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Remove the package handler and level (used by tests)."""
    global _handler_installed
    _handler_installed = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
