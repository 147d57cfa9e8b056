"""Shared CLI helpers."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config, load_config, parse_set
from ..exceptions import (
    ConfigurationError,
    GoscopeError,
    InvalidPathError,
    UnsupportedNodeError,
)

console = Console()
err_console = Console(stderr=True)


class ExitCode:
    """Process exit codes.

    Ranges:
      0: Success
      1: Analysis failed (unreadable or unparsable input)
      80-89: User errors (bad input)
      100+: Internal errors
    """

    SUCCESS = 0
    ANALYSIS_ERROR = 1
    CONFIG_ERROR = 81
    INTERNAL_ERROR = 100


PATH_ARGUMENT = typer.Argument(
    Path("."),
    help="Root of the Go module (the directory holding go.mod)",
    exists=True,
    file_okay=False,
    dir_okay=True,
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Suppress logging")
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)
TESTS_OPTION = typer.Option(False, "--tests", help="Include _test packages")
LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    help="Also append log records to this file",
    file_okay=True,
    dir_okay=False,
)


def resolve_config(
    config: Optional[Path] = None,
    exclude: str = "",
    select_exact: str = "",
    select: str = "",
    nostdlib: bool = False,
    tests: bool = False,
) -> Config:
    """Build a Config from CLI options; unset flags leave file settings alone."""
    overrides = {}
    if exclude:
        overrides["exclude"] = parse_set(exclude)
    if select_exact:
        overrides["select_exact"] = parse_set(select_exact)
    if select:
        overrides["select"] = parse_set(select)
    if nostdlib:
        overrides["exclude_stdlib"] = True
    if tests:
        overrides["include_tests"] = True
    return load_config(config_file=config, **overrides)


def resolve_root(path: Path) -> Path:
    root = path.resolve()
    if not root.is_dir():
        raise InvalidPathError(path, "not a directory")
    return root


@contextmanager
def report_errors(logger: logging.Logger) -> Iterator[None]:
    """Turn goscope errors into a red message and a non-zero exit."""
    try:
        yield
    except typer.Exit:
        raise
    except UnsupportedNodeError as e:
        logger.critical("Extraction aborted", exc_info=True)
        err_console.print(f"[red bold]Internal error:[/red bold] {escape(str(e))}")
        raise typer.Exit(ExitCode.INTERNAL_ERROR)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)
    except GoscopeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.ANALYSIS_ERROR)
    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.INTERNAL_ERROR)
