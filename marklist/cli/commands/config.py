# marklist/cli/commands/config.py
# Settings mgmt subcommands (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from builtins import list as builtin_list
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import MarklistSettings, settings_manager
from ...core.exceptions import SettingsValidationError
from ...core.verbose import vlog_config
from ...mark_io.console import console
from ...ui.theming.styled_helpers import (
    format_setting_value,
    styled_setting_line,
    styled_success_line,
)
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import accent_gradient, styled_checkmark, success_gradient
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[marklist.accent2]Manage Marklist settings[/]"
)
app.add_typer(config_app, name="config")


def _known_keys() -> set[str]:
    return {f.name for f in fields(MarklistSettings)}


def _require_known(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")


# coerce string value to JSON value (numbers, bools, null, objects) or keep raw string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | builtin_list[Any] | dict[str, Any]:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print(accent_gradient("Current Configuration"))
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()

    for key, value in data.items():
        console.print(*styled_setting_line(key, format_setting_value(value)))

    console.print()
    console.print(
        "[dim]Use [/][marklist.accent2]marklist config --help[/][dim] to see available commands[/]"
    )


# * Show current settings when no subcommand is given
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    _require_known(key)
    value = settings_manager.get(key)
    # plain echo so glyphs like "[" are never read as markup
    typer.echo(json.dumps(value, ensure_ascii=False))


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    _require_known(key)

    if key == "theme" and value not in THEMES:
        valid_themes = ", ".join(sorted(THEMES))
        raise typer.BadParameter(f"Invalid theme '{value}'. Valid themes: {valid_themes}")

    coerced = _coerce_value(value)
    # free-text settings stay strings even when they look like JSON
    if key in ("wikipedia_lang", "lexin_host", "user_agent", "theme"):
        coerced = value

    try:
        settings_manager.set(key, coerced)
    except SettingsValidationError as e:
        raise typer.BadParameter(str(e))

    vlog_config(key, coerced)
    if key == "theme":
        from ...mark_io.console import refresh_theme

        refresh_theme()

    console.print(
        *styled_success_line(
            f"Set {key}", format_setting_value(coerced)
        )
    )


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print(styled_checkmark(), success_gradient("Reset settings to defaults"))


# * Show the configuration file path
@config_app.command()
def path() -> None:
    typer.echo(str(settings_manager.config_path))


# noqa: A001 - command name 'list'
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()
