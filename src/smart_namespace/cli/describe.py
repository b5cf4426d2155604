"""Inspection commands: roles table and diagnostic dump."""

import typer
from rich.table import Table

from ..analyzer import NamespaceAnalyzer
from ..analyzer import info as dump_info
from ..exceptions import NamespaceError
from ..registry import Registry
from . import app
from ._common import console, fail, get_settings, parse_name


@app.command()
def roles(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Qualified name, e.g. User::Endpoint::Index"),
    position: int = typer.Option(
        0, "--position", "-p", help="Position used for the section role"
    ),
):
    """
    Show every role derived from a qualified name.

    [bold cyan]Examples:[/bold cyan]

      smart-namespace roles Home::CategoriesInitializer::Users

      smart-namespace roles Admin::Home::Cell::Index -p -2
    """
    analyzer = NamespaceAnalyzer(parse_name(ctx, name))

    table = Table(title=str(analyzer.name_path), show_header=True, header_style="bold cyan")
    table.add_column("Role")
    table.add_column("Value")

    rows = [
        ("scope", analyzer.scope()),
        ("concept", analyzer.concept()),
        ("resource", analyzer.resource()),
        ("service", analyzer.service()),
        (f"section[{position}]", analyzer.section(position)),
        ("handle", analyzer.handle()),
    ]
    for role, value in rows:
        table.add_row(role, value if value is not None else "[dim]-[/dim]")

    console.print(table)


@app.command()
def info(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Qualified name, e.g. User::Endpoint::Index"),
):
    """
    Print the diagnostic dump for a qualified name.

    The name is built into a scratch registry first so its components resolve.
    """
    settings = get_settings(ctx)
    name_path = parse_name(ctx, name)
    registry = Registry()
    try:
        registry.build(name_path)
        dump_info(name_path, registry=registry, config=settings)
    except NamespaceError as e:
        fail(e)
