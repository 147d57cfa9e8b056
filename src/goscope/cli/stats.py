"""Module statistics command."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..formatters import format_stats
from ..logging_config import setup_logging
from ..scanning import load_directories
from . import app
from ._common import (
    CONFIG_OPTION,
    LOG_FILE_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    VERBOSE_OPTION,
    console,
    report_errors,
    resolve_config,
    resolve_root,
)


@app.command()
def stats(
    path: Path = PATH_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Display totals of packages, files, structs, methods and imports (tests included)."""
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = replace(resolve_config(config), include_tests=True)
        module, directories = load_directories(resolve_root(path), cfg)
        console.print(format_stats(directories, module))
