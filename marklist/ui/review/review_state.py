# marklist/ui/review/review_state.py
# State & viewport management for the interactive review screen

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ...core.buffer import Buffer
from ...core.commands import MarkSession
from ...core.marker import MarkSummary, summarize

# type alias for the save hook (path is bound by the caller)
SaveCallback = Callable[[Buffer], None]


@dataclass
class ReviewState:

    session: MarkSession
    filename: str = "untitled.txt"
    view_height: int = 20

    # first buffer line shown in the viewport
    top: int = 0

    # lifecycle
    quit_requested: bool = False
    saved_count: int = 0

    @property
    def buffer(self) -> Buffer:
        return self.session.buffer

    @property
    def message(self) -> str:
        return self.session.message

    @property
    def summary(self) -> MarkSummary:
        return summarize(self.buffer.lines, self.session.alphabet)

    @property
    def is_complete(self) -> bool:
        return self.quit_requested


class ReviewStateManager:

    def __init__(self, state: ReviewState, on_save: SaveCallback | None = None):
        self.state = state
        self.on_save = on_save

    # ===== VIEWPORT =====

    # * Keep the cursor visible; center it when an operation asked for a recenter
    def sync_viewport(self) -> None:
        buffer = self.state.buffer
        height = self.state.view_height
        max_top = max(buffer.line_count - height, 0)

        if buffer.recenter_requested:
            buffer.recenter_requested = False
            self.state.top = buffer.line - height // 2
        elif buffer.line < self.state.top:
            self.state.top = buffer.line
        elif buffer.line >= self.state.top + height:
            self.state.top = buffer.line - height + 1

        self.state.top = max(0, min(self.state.top, max_top))

    # ===== EDITING KEYS =====

    def move_up(self) -> None:
        self._move_line(-1)

    def move_down(self) -> None:
        self._move_line(1)

    def _move_line(self, delta: int) -> None:
        buffer = self.state.buffer
        column = buffer.column
        if buffer.forward_line(delta):
            buffer.set_column(column)

    def move_left(self) -> None:
        self.state.buffer.move_column(-1)

    def move_right(self) -> None:
        self.state.buffer.move_column(1)

    def line_start(self) -> None:
        self.state.buffer.beginning_of_line()

    def line_end(self) -> None:
        self.state.buffer.end_of_line()

    def next_line(self) -> None:
        self.state.buffer.forward_line(1)

    def insert_char(self, char: str) -> None:
        self.state.buffer.insert(char)

    def delete_before_cursor(self) -> None:
        self.state.buffer.delete_backward_char()

    # ===== LIFECYCLE =====

    def save(self) -> None:
        if self.on_save is None:
            self.state.session.report("Saving is disabled for this session")
            return
        self.on_save(self.state.buffer)
        self.state.saved_count += 1
        self.state.session.report(f"Wrote {self.state.filename}")

    def request_quit(self) -> None:
        self.state.quit_requested = True


def display_name(path: Path | None) -> str:
    return path.name if path is not None else "untitled.txt"
