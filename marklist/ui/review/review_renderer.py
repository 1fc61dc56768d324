# marklist/ui/review/review_renderer.py
# Rendering for the interactive review screen: header, buffer viewport & lighter footer

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.rich_components import Align, Layout, Panel, RenderableType, Table, Text

if TYPE_CHECKING:
    from .review_state import ReviewState
    from ...core.marker import MarkSummary

MIN_W, MAX_W = 60, 140
# header (3) + footer (4) + content & outer panel borders (2 + 2)
CHROME_H = 11


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


class ReviewRenderer:

    def __init__(self, width: int):
        self.width = width

    # ===== BUFFER VIEWPORT =====

    def render_line(self, state: "ReviewState", index: int) -> Text:
        buffer = state.buffer
        text = buffer.lines[index]
        marked = state.session.alphabet.is_marked(text)

        gutter = Text(f"{index + 1:>4} ", style="dim")
        body = Text(text, style="marklist.marked" if marked else "marklist.unmarked")

        if index == buffer.line:
            gutter.stylize("marklist.accent")
            # show the cursor as a highlighted cell (a space past end of line)
            col = buffer.column
            if col >= len(text):
                body.append(" ")
            body.stylize("marklist.cursor", col, col + 1)

        return Text.assemble(gutter, body)

    def render_viewport(self, state: "ReviewState") -> Text:
        end = min(state.top + state.view_height, state.buffer.line_count)
        lines = [self.render_line(state, i) for i in range(state.top, end)]
        viewport = Text("\n").join(lines)
        viewport.no_wrap = True
        viewport.overflow = "ellipsis"
        return viewport

    # ===== HEADER/FOOTER =====

    def render_header(self, state: "ReviewState") -> RenderableType:
        buffer = state.buffer
        modified = " [modified]" if buffer.modified else ""
        left_text = Text(f"Reviewing: {state.filename}{modified}", style="bold marklist.accent")
        right_text = Text(
            f"Line {buffer.line + 1} of {buffer.line_count}, col {buffer.column}",
            style="marklist.accent2",
        )

        header_table = Table.grid(padding=0, expand=True)
        header_table.add_column(ratio=1, justify="left")
        header_table.add_column(no_wrap=True, justify="right")
        header_table.add_row(left_text, right_text)

        return Panel(header_table, border_style="dim", padding=(0, 1))

    # * Mode-line style lighter: glyph counts, unmarked count & the last message
    def render_lighter(self, summary: "MarkSummary") -> Text:
        counts = " ".join(f"{glyph}{count}" for glyph, count in summary.per_glyph.items())
        return Text(
            f"Marklist [{counts}] unmarked {summary.unmarked}/{summary.total}",
            style="marklist.accent2",
        )

    def render_footer(self, state: "ReviewState") -> RenderableType:
        message = state.message.replace("\n", " ")
        rows = Table.grid(padding=0, expand=True)
        rows.add_column(no_wrap=True, overflow="ellipsis")
        rows.add_row(self.render_lighter(state.summary))
        rows.add_row(Text(message or " ", style="dim"))
        return Panel(rows, border_style="dim", padding=(0, 1))

    # ===== MAIN SCREEN LAYOUT =====

    def render_screen(self, state: "ReviewState") -> RenderableType:
        main_layout = Layout()
        main_layout.split_column(
            Layout(name="header", size=3),
            Layout(name="content", ratio=1),
            Layout(name="footer", size=4),
        )

        main_layout["header"].update(self.render_header(state))
        main_layout["content"].update(
            Panel(self.render_viewport(state), border_style="marklist.accent2")
        )
        main_layout["footer"].update(self.render_footer(state))

        outer = Panel(
            main_layout,
            border_style="marklist.accent",
            width=self.width,
            height=state.view_height + CHROME_H,
        )
        return Align.left(outer, vertical="top")


def create_renderer_from_console() -> ReviewRenderer:
    from ...mark_io.console import console

    return ReviewRenderer(_clamp(console.size.width, MIN_W, MAX_W))
