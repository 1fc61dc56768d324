# marklist/cli/commands/item.py
# Item command: print the lookup item the marker would extract from a line

from __future__ import annotations

import typer

from ...core.patterns import find_item
from ..app import app


@app.command(help="Print the item extracted from LINE")
def item(line: str = typer.Argument(..., help="One line of text")) -> None:
    found = find_item(line)
    if found is None:
        typer.echo("No item found", err=True)
        raise typer.Exit(1)
    typer.echo(found)
