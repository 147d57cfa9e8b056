"""Import graph and import frequency table."""

from pathlib import Path
from typing import Optional

import typer

from ..formatters import format_imports, format_imports_table
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
def imports(
    path: Path = PATH_ARGUMENT,
    tests: bool = TESTS_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Display the package import graph (Graphviz), standard library left out.

    [bold cyan]Examples:[/bold cyan]

      goscope imports . | dot -Tpng > imports.png
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = resolve_config(config, tests=tests)
        _, directories = load_directories(resolve_root(path), cfg)
        typer.echo(format_imports(directories), nl=False)


@app.command("imports-table")
def imports_table(
    path: Path = PATH_ARGUMENT,
    nostdlib: bool = typer.Option(False, "--nostdlib", "-n", help="Exclude stdlib packages"),
    select: str = typer.Option("", "--select", "-s", help="Select packages (comma-separated)"),
    tests: bool = TESTS_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Display how many packages import each path, most imported first.

    Module packages are shown in green, standard library in yellow.
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = resolve_config(config, select=select, nostdlib=nostdlib, tests=tests)
        module, directories = load_directories(resolve_root(path), cfg)
        console.print(format_imports_table(directories, module), end="")
