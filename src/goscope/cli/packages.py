"""Struct diagram of every package in a module."""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from ..formatters import format_packages
from ..logging_config import setup_logging
from ..scanning import load_directories
from . import app
from ._common import (
    CONFIG_OPTION,
    LOG_FILE_OPTION,
    PATH_ARGUMENT,
    QUIET_OPTION,
    VERBOSE_OPTION,
    report_errors,
    resolve_config,
    resolve_root,
)


@app.command()
def packages(
    path: Path = PATH_ARGUMENT,
    include_constrained: bool = typer.Option(
        False,
        "--include-constrained",
        help="Keep packages with build-constrained files (skipped by default)",
    ),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Display the structs of every package, one Graphviz cluster per package.

    Packages with any build-constrained file are skipped unless
    --include-constrained is given, since their files may not compile
    together.
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        cfg = replace(resolve_config(config), skip_build_constrained=not include_constrained)
        _, directories = load_directories(resolve_root(path), cfg)
        typer.echo(format_packages(directories), nl=False)
