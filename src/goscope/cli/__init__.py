"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__

app = typer.Typer(
    name="goscope",
    help="goscope - Structural reports for Go modules",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"goscope {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Structural reports for Go modules: struct diagrams, import graphs, type listings."""


# Import subcommands to register them
from .structs import structs as _structs  # noqa: F401, E402
from .packages import packages as _packages  # noqa: F401, E402
from .imports import imports as _imports, imports_table as _imports_table  # noqa: F401, E402
from .typelist import types as _types  # noqa: F401, E402
from .entrypoints import entrypoints as _entrypoints  # noqa: F401, E402
from .stats import stats as _stats  # noqa: F401, E402


def main() -> None:
    app()
