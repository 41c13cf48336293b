"""
Logging configuration for Coupling Insight.

Log records go to a rich handler on stderr so they never mix with JSON
written to stdout. Library modules only call get_logger(); handlers are
installed once, by the CLI, through setup_logging().
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "coupling_insight"

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers of libraries that are chatty below WARNING
NOISY_LOGGERS = ("httpx", "httpcore")


def _level_for(verbose: bool, quiet: bool) -> int:
    # quiet wins when both flags are given
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Install the stderr handler (and optionally a file handler).

    Args:
        verbose: DEBUG level, with source paths and locals in tracebacks
        quiet: ERROR level only
        log_file: Also append plain-text records to this file
        console: stderr console to log through. Pass the console that live
            progress displays use so records are printed above the bar.

    Returns:
        The coupling_insight logger
    """
    level = _level_for(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console or Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        to_file = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        to_file.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(to_file)

    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the coupling_insight namespace, e.g. get_logger(__name__)."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
