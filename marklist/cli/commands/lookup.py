# marklist/cli/commands/lookup.py
# Lookup command: run the favourites chain or one provider for a term

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...lookup import favourite_search
from ...lookup.providers.factory import build_lookup, favourite_strategies
from ..app import app
from ..decorators import handle_marklist_error
from ..params import FAVOURITES, ProviderOpt


@app.command(help="Look up TERM via the favourites chain or a single provider")
@handle_marklist_error
def lookup(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Text to look up"),
    provider: str = ProviderOpt(),
) -> None:
    settings = get_settings(ctx)

    if provider == FAVOURITES:
        strategies = favourite_strategies(settings)
    else:
        strategies = [build_lookup(provider, settings)]

    result = favourite_search(term, strategies)
    if not result:
        typer.echo(f"No result for {term!r}", err=True)
        raise typer.Exit(1)
    typer.echo(result)
