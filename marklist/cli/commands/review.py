# marklist/cli/commands/review.py
# Review command: interactive line-by-line marking of a text file

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.buffer import Buffer
from ...core.exceptions import DocumentError
from ...core.marker import summarize
from ...core.verbose import vlog
from ...mark_io import read_buffer, write_buffer
from ...ui.display.reporting import print_success_line, report_summary
from ...ui.review import InteractiveReviewer
from ..app import app
from ..decorators import handle_marklist_error
from ..helpers import build_session, is_test_environment
from ..params import FileArg, LineOpt, SaveOpt


@app.command(help="Mark the lines of FILE interactively")
@handle_marklist_error
def review(
    ctx: typer.Context,
    file: Path = FileArg(),
    save: bool = SaveOpt(),
    line: int = LineOpt(),
    keys: Optional[str] = typer.Option(
        None,
        "--keys",
        help="Replay these keystrokes instead of opening the interactive screen",
    ),
) -> None:
    settings = get_settings(ctx)
    buffer = read_buffer(file)
    buffer.goto_line(line - 1)

    session = build_session(settings, buffer)

    def _save(b: Buffer) -> None:
        write_buffer(b, file)

    reviewer = InteractiveReviewer(
        session,
        path=file,
        view_height=settings.view_height,
        on_save=_save if save else None,
    )

    if keys is not None:
        vlog("REVIEW", f"Replaying {len(keys)} key(s)")
        state = reviewer.replay(keys)
    elif is_test_environment():
        raise DocumentError("Interactive review needs a terminal; pass --keys to script it")
    else:
        state = reviewer.run()

    if session.message:
        typer.echo(session.message)

    if save and buffer.modified:
        write_buffer(buffer, file)
        print_success_line("Wrote", file)
    elif buffer.modified:
        typer.echo("Changes discarded (--no-save)")
    elif state.saved_count == 0:
        typer.echo("No changes")

    report_summary(summarize(buffer.lines, session.alphabet), file.name)
