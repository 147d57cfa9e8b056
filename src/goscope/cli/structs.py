"""Struct diagram of a single Go file."""

from pathlib import Path
from typing import Optional

import typer

from ..formatters import format_structs
from ..logging_config import setup_logging
from ..scanning import load_structs
from . import app
from ._common import LOG_FILE_OPTION, QUIET_OPTION, VERBOSE_OPTION, report_errors


@app.command()
def structs(
    file: Path = typer.Argument(
        ...,
        help="Go source file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
):
    """
    Display the structs defined in a file as a Graphviz graph.

    [bold cyan]Examples:[/bold cyan]

      goscope structs internal/parser.go | dot -Tsvg > structs.svg
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    with report_errors(logger):
        found = load_structs(file.resolve())
        typer.echo(format_structs(found), nl=False)
