# marklist/ui/display/reporting.py
# Result reporting: mark summary table & success lines for CLI commands

from __future__ import annotations

from pathlib import Path

from ...core.marker import MarkSummary
from ...mark_io.console import console
from ..core.rich_components import Table, Text
from ..theming.theme_engine import accent_gradient, styled_arrow, styled_checkmark, success_gradient


def print_success_line(label: str, path: str | Path | None = None) -> None:
    # checkmark + gradient label [+ arrow + path]
    if path is not None:
        console.print(styled_checkmark(), success_gradient(label), styled_arrow(), f"{path}")
    else:
        console.print(styled_checkmark(), success_gradient(label))


# * Per-glyph counts, unmarked count & first unmarked line (1-based)
def build_summary_table(summary: MarkSummary, title: str = "") -> Table:
    table = Table(title=title or None, title_justify="left", show_edge=False)
    table.add_column("Mark", style="marklist.accent2", no_wrap=True)
    table.add_column("Lines", justify="right")

    for glyph, count in summary.per_glyph.items():
        table.add_row(Text(glyph), str(count))
    table.add_row("[dim]unmarked[/]", f"[marklist.unmarked]{summary.unmarked}[/]")
    table.add_row("[bold]total[/]", f"[bold]{summary.total}[/]")
    return table


def report_summary(summary: MarkSummary, filename: str) -> None:
    console.print(accent_gradient(f"Marks in {filename}"))
    console.print(build_summary_table(summary))

    if summary.first_unmarked is None:
        console.print(styled_checkmark(), success_gradient("Every line is marked"))
    else:
        console.print(
            f"[dim]First unmarked line:[/] [marklist.accent2]{summary.first_unmarked + 1}[/]"
        )
