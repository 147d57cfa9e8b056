"""Entrypoint listing command."""

from pathlib import Path
from typing import Optional

from ..formatters import format_entrypoints
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
def entrypoints(
    path: Path = PATH_ARGUMENT,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Display every main.go of the module by its module-qualified path."""
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = resolve_config(config)
        module, directories = load_directories(resolve_root(path), cfg)
        console.print(format_entrypoints(directories, module), end="")
