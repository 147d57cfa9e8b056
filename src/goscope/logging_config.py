"""
Logging for goscope.

Reports go to stdout (DOT text is meant to be piped into ``dot``), so every
log record goes to stderr through a rich handler. Extraction code logs skips
and dropped methods at DEBUG; ``--verbose`` makes them visible.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "goscope"

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
    # quiet wins when both flags are given
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _file_handler(log_file: Union[str, Path]) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Route logging to a rich handler on stderr.

    Args:
        verbose: Show DEBUG records, with timestamps and source locations
        quiet: Show ERROR records only
        log_file: Also append records to this file

    Returns:
        The ``goscope`` logger
    """
    level = _level(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # file paths and Go type strings contain brackets
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    # force: the CLI may configure logging more than once per process
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``goscope`` namespace; ``None`` gives the root one."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
