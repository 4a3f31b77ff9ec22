"""Logging for OverlapChain.

Every module logs through a child of the ``overlapchain`` logger obtained from
`get_logger`. The package logger carries the only handler; its level decides
what reaches the console:

- DEBUG shows per-start-vertex progress from the search engine.
- INFO (default) shows load, build and search summaries plus the heartbeat.
- WARNING hides all of the above, leaving errors.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "overlapchain"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the console handler on the ``overlapchain`` logger once.

    Later calls return the already configured logger unchanged.

    Args:
        level: Initial level (default: INFO).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install; defaults to a stdout StreamHandler.

    Returns:
        The package logger.
    """
    global _configured

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return package_logger

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under the package logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    package_logger = setup_root_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show DEBUG records, including per-start-vertex search progress."""
    set_global_log_level(logging.DEBUG)


def configure_cli_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Set the package level from the CLI's ``--verbose``/``--quiet`` flags.

    ``verbose`` wins when both are given.

    Returns:
        The level applied.
    """
    if verbose:
        enable_debug_logging()
    elif quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)
    return logging.getLogger(ROOT_LOGGER_NAME).level


def reset_logging() -> None:
    """Drop the package handler and level so the next call reconfigures.

    Used by the test-suite to isolate tests from each other.
    """
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
