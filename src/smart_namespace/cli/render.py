"""Rendering commands: classify items into paths and transform names."""

from typing import List

import typer

from ..analyzer import transform as transform_name
from ..exceptions import NamespaceError
from ..naming import path as render_path
from ..registry import Registry
from . import app
from ._common import console, fail, parse_name


@app.command()
def path(
    items: List[str] = typer.Argument(..., help="Words to classify, e.g. user models open_tags"),
):
    """
    Classify words into a qualified name.

    [bold cyan]Examples:[/bold cyan]

      smart-namespace path user Models open_tags find
    """
    try:
        console.print(render_path(*items), highlight=False)
    except NamespaceError as e:
        fail(e)


@app.command()
def transform(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Subject name, e.g. User::Cell::Index"),
    items: List[str] = typer.Argument(
        ...,
        help="Literal words and role markers (__scope__, __concept__, __resource__, "
        "__section__, __service__, __handle__)",
    ),
    build: bool = typer.Option(
        False, "--build", "-b", help="Build the result into a scratch registry"
    ),
):
    """
    Build a new name from a subject's roles.

    [bold cyan]Examples:[/bold cyan]

      smart-namespace transform User::Cell::Index __resource__ endpoint __handle__
    """
    name_path = parse_name(ctx, name)
    try:
        target = transform_name(name_path, items, resolve=False)
        if build:
            registry = Registry()
            entity = registry.build(target)
            console.print(f"Built {entity!r} ({len(registry)} entries)", highlight=False)
        else:
            console.print(target, highlight=False)
    except NamespaceError as e:
        fail(e)
