"""Type listing command."""

from pathlib import Path
from typing import Optional

import typer

from ..formatters import format_types
from ..logging_config import setup_logging
from ..scanning import load_directories
from . import app
from ._common import (
    CONFIG_OPTION,
    LOG_FILE_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    TESTS_OPTION,
    VERBOSE_OPTION,
    console,
    report_errors,
    resolve_config,
    resolve_root,
)


@app.command()
def types(
    path: Path = PATH_ARGUMENT,
    exclude: str = typer.Option("", "--exclude", "-e", help="Exclude packages (comma-separated)"),
    select_exact: str = typer.Option(
        "", "--select-exact", "-E", help="Select exact packages (comma-separated)"
    ),
    select: str = typer.Option("", "--select", "-s", help="Select packages (comma-separated)"),
    tests: bool = TESTS_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Display the structs of each package with their fields and methods.

    [bold cyan]Examples:[/bold cyan]

      goscope types . --select internal --exclude mock
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = resolve_config(
            config, exclude=exclude, select_exact=select_exact, select=select, tests=tests
        )
        module, directories = load_directories(resolve_root(path), cfg)
        console.print(format_types(directories, module))
