# marklist/cli/params.py
# CLI argument definitions & normalization helpers

from __future__ import annotations

from typing import Any

import typer

from ..lookup.providers.factory import available_providers

FAVOURITES = "favourites"


def _normalize_provider(value: str | None) -> str:
    if value is None:
        return FAVOURITES
    v = value.strip().lower()
    # accept the American spelling too
    if v in (FAVOURITES, "favorites", "fav"):
        return FAVOURITES
    if v in available_providers():
        return v
    choices = "|".join([FAVOURITES, *available_providers()])
    raise typer.BadParameter(f"Invalid provider. Choose: {choices}")


def FileArg() -> Any:
    return typer.Argument(
        ...,
        help="Path to the UTF-8 text file to mark",
        dir_okay=False,
        resolve_path=True,
    )


def SaveOpt() -> Any:
    return typer.Option(
        True,
        "--save/--no-save",
        help="Write the marked file back when the session ends",
    )


def LineOpt() -> Any:
    return typer.Option(
        1,
        "--line",
        "-l",
        min=1,
        help="1-based line to start the session on",
    )


def ProviderOpt() -> Any:
    return typer.Option(
        FAVOURITES,
        "--provider",
        "-p",
        callback=_normalize_provider,
        help="Lookup provider: favourites (fallback chain) or a single provider name",
    )
