"""Shared CLI helpers."""

import typer
from rich.console import Console

from ..config import DEFAULT_CONFIG, NamespaceConfig
from ..exceptions import NamespaceError
from ..naming import NamePath, tokenize

console = Console()


def get_settings(ctx: typer.Context) -> NamespaceConfig:
    """Settings loaded by the app callback."""
    return ctx.obj if isinstance(ctx.obj, NamespaceConfig) else DEFAULT_CONFIG


def parse_name(ctx: typer.Context, name: str) -> NamePath:
    """Tokenize a name typed on the command line, exiting on malformed input."""
    settings = get_settings(ctx)
    try:
        return tokenize(settings.normalize_name(name))
    except NamespaceError as e:
        fail(e)


def fail(error: NamespaceError) -> None:
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
