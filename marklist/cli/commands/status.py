# marklist/cli/commands/status.py
# Status command: mark counts & first unmarked line of a file

from __future__ import annotations

from pathlib import Path

import typer

from ...config.settings import get_settings
from ...core.marker import summarize
from ...mark_io import read_buffer
from ...ui.display.reporting import report_summary
from ..app import app
from ..decorators import handle_marklist_error
from ..params import FileArg


@app.command(help="Show mark counts & the first unmarked line of FILE")
@handle_marklist_error
def status(ctx: typer.Context, file: Path = FileArg()) -> None:
    settings = get_settings(ctx)
    buffer = read_buffer(file)
    report_summary(summarize(buffer.lines, settings.alphabet), file.name)
