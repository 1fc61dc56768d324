# marklist/core/buffer.py
# Mutable document & cursor handle passed explicitly into every mark operation

from __future__ import annotations

import re
from dataclasses import dataclass, field


# * In-memory text buffer w/ a single cursor (line index + column)
@dataclass
class Buffer:
    lines: list[str] = field(default_factory=lambda: [""])
    line: int = 0
    column: int = 0
    modified: bool = False
    # set by recenter(); the renderer consumes & clears it
    recenter_requested: bool = False
    trailing_newline: bool = True
    # line terminator written back by `text`; "\r\n" only when every break in the source was CRLF
    newline: str = "\n"

    def __post_init__(self) -> None:
        if not self.lines:
            self.lines = [""]
        for text in self.lines:
            _check_single_line(text)
        self.line = max(0, min(self.line, len(self.lines) - 1))
        self.column = max(0, min(self.column, len(self.lines[self.line])))

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        if not text:
            return cls(lines=[""], trailing_newline=False)
        newline = "\r\n" if "\r\n" in text and text.count("\r\n") == text.count("\n") else "\n"
        # split on the terminator only; form feeds, \x85, \u2028 & stray \r stay inside their line
        trailing = text.endswith(newline)
        if trailing:
            text = text[: -len(newline)]
        return cls(lines=text.split(newline), trailing_newline=trailing, newline=newline)

    @property
    def text(self) -> str:
        body = self.newline.join(self.lines)
        if self.trailing_newline:
            body += self.newline
        return body

    # ===== CURSOR QUERIES =====

    @property
    def current_line(self) -> str:
        return self.lines[self.line]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def at_line_start(self) -> bool:
        return self.column == 0

    @property
    def is_first_line(self) -> bool:
        return self.line == 0

    @property
    def is_last_line(self) -> bool:
        return self.line == len(self.lines) - 1

    # ===== CURSOR MOVEMENT =====

    def beginning_of_line(self) -> None:
        self.column = 0

    def end_of_line(self) -> None:
        self.column = len(self.current_line)

    def set_column(self, column: int) -> None:
        self.column = max(0, min(column, len(self.current_line)))

    def move_column(self, delta: int) -> None:
        self.set_column(self.column + delta)

    # * Move n lines (negative = backward) & land on column 0; refuse to leave the buffer
    def forward_line(self, n: int = 1) -> bool:
        target = self.line + n
        if target < 0 or target >= len(self.lines):
            return False
        self.line = target
        self.column = 0
        return True

    def goto_line(self, index: int) -> None:
        self.line = max(0, min(index, len(self.lines) - 1))
        self.column = 0

    def recenter(self) -> None:
        self.recenter_requested = True

    # ===== TEXT MUTATION =====

    def insert(self, text: str) -> None:
        _check_single_line(text)
        if not text:
            return
        current = self.current_line
        self.lines[self.line] = current[: self.column] + text + current[self.column :]
        self.column += len(text)
        self.modified = True

    # * Delete up to n characters after the cursor (bounded by end of line)
    def delete_chars(self, n: int = 1) -> int:
        current = self.current_line
        removed = min(max(n, 0), len(current) - self.column)
        if removed:
            self.lines[self.line] = current[: self.column] + current[self.column + removed :]
            self.modified = True
        return removed

    def delete_backward_char(self) -> bool:
        if self.column == 0:
            return False
        self.column -= 1
        self.delete_chars(1)
        return True

    # * Swap the first old_len characters of the current line for new; cursor ends at column 0
    def replace_prefix(self, old_len: int, new: str) -> None:
        _check_single_line(new)
        current = self.current_line
        self.lines[self.line] = new + current[old_len:]
        self.column = 0
        self.modified = True

    # ===== SEARCH =====

    def search_in_line(self, pattern: re.Pattern[str], move: bool = False) -> re.Match[str] | None:
        """Search forward from the cursor, bounded by the current line.

        The cursor only moves (to the match start) when ``move`` is true.
        """
        match = pattern.search(self.current_line, self.column)
        if match is not None and move:
            self.column = match.start()
        return match


def _check_single_line(text: str) -> None:
    if "\n" in text:
        raise ValueError("Buffer lines must not contain line breaks")
