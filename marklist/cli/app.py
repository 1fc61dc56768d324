# marklist/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (MARKLIST_CONFIG may come from .env)
load_dotenv()

from ..config.settings import settings_manager
from ..mark_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Mark the lines of a text file one by one & look up their items.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, theme & logging; show help when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    from ..ui.theming.console_theme import refresh_theme

    refresh_theme()

    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # must be after settings load to check dev_mode
    from ..core.verbose import cleanup_verbose, init_verbose
    from ..core.output import get_output_manager

    verbose_enabled = verbose or log_file is not None
    dev_mode = getattr(ctx.obj, "dev_mode", False)
    init_verbose(enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode)
    get_output_manager().start_session(ctx.invoked_subcommand or "")
    ctx.call_on_close(cleanup_verbose)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import review as _review  # noqa: E402,F401
from .commands import status as _status  # noqa: E402,F401
from .commands import lookup as _lookup  # noqa: E402,F401
from .commands import item as _item  # noqa: E402,F401
from .commands import config as _config  # noqa: E402,F401
