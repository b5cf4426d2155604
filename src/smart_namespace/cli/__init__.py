"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..config import load_config
from ..exceptions import ConfigurationError
from ..logging_config import setup_logging
from ._common import console

app = typer.Typer(
    name="smart-namespace",
    help="smart-namespace - infer roles from qualified names like User::Endpoint::Index",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"smart-namespace {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    separator: Optional[str] = typer.Option(
        None,
        "--separator",
        help="Separator used in the names you type (default: ::)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Infer scope, concept, resource, service, section and handle roles.

    [bold cyan]Examples:[/bold cyan]

      smart-namespace roles Admin::UsersController

      smart-namespace transform User::Cell::Index __resource__ endpoint __handle__
    """
    try:
        settings = load_config(
            config_file=config, verbose=verbose, quiet=quiet, input_separator=separator
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    setup_logging(verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet")
    ctx.obj = settings


# Import subcommands to register them
from .describe import info as _info, roles as _roles  # noqa: F401, E402
from .render import path as _path, transform as _transform  # noqa: F401, E402
