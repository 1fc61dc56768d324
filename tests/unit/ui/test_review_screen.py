# tests/unit/ui/test_review_screen.py
# Unit tests for the interactive review screen: state, key handling & rendering

from unittest.mock import MagicMock

import pytest
from readchar import key
from rich.console import Console

from marklist.core.buffer import Buffer
from marklist.core.commands import MarkSession
from marklist.ui.review import (
    InteractiveReviewer,
    ReviewRenderer,
    ReviewState,
    ReviewStateManager,
)
from marklist.ui.theming.theme_engine import get_marklist_theme


def _reviewer(lines, view_height=5, on_save=None, **session_kwargs):
    session = MarkSession(buffer=Buffer(lines=list(lines)), **session_kwargs)
    return InteractiveReviewer(
        session,
        view_height=view_height,
        on_save=on_save,
        renderer=ReviewRenderer(80),
    )


class TestViewport:

    # * Cursor below the viewport scrolls it down
    def test_scrolls_to_keep_cursor_visible(self):
        state = ReviewState(MarkSession(Buffer(lines=[str(i) for i in range(20)])), view_height=5)
        manager = ReviewStateManager(state)
        state.buffer.goto_line(7)
        manager.sync_viewport()
        assert state.top == 3
        state.buffer.goto_line(1)
        manager.sync_viewport()
        assert state.top == 1

    # * Recenter requests center the cursor line & are consumed
    def test_recenter(self):
        state = ReviewState(MarkSession(Buffer(lines=[str(i) for i in range(20)])), view_height=6)
        manager = ReviewStateManager(state)
        state.buffer.goto_line(10)
        state.buffer.recenter()
        manager.sync_viewport()
        assert state.top == 7
        assert not state.buffer.recenter_requested

    # * Viewport never scrolls past the end
    def test_clamped_at_end(self):
        state = ReviewState(MarkSession(Buffer(lines=[str(i) for i in range(8)])), view_height=6)
        manager = ReviewStateManager(state)
        state.buffer.goto_line(7)
        state.buffer.recenter()
        manager.sync_viewport()
        assert state.top == 2


class TestKeyHandling:

    # * Marking session driven by keys
    def test_marking_keys(self):
        reviewer = _reviewer(["#a", "b", "c"])
        reviewer.replay("n?")
        assert reviewer.state.buffer.lines == ["#a", "?b", "c"]
        assert reviewer.state.message == "Mark replaced"

    # * Printable non-command keys type text away from column 0
    def test_typing_off_column_zero(self):
        reviewer = _reviewer(["ab"])
        reviewer.handle_key(key.RIGHT)
        reviewer.replay("xn#")
        assert reviewer.state.buffer.lines == ["axn#b"]

    # * Unbound printable keys at column 0 are inserted too
    def test_typing_at_column_zero(self):
        reviewer = _reviewer(["ab"])
        reviewer.handle_key("z")
        assert reviewer.state.buffer.lines == ["zab"]

    # * Arrows keep the column where possible; Enter goes to the next line start
    def test_editing_keys(self):
        reviewer = _reviewer(["abcd", "ef", "ghij"])
        buffer = reviewer.state.buffer
        for k in (key.END, key.DOWN):
            reviewer.handle_key(k)
        assert (buffer.line, buffer.column) == (1, 2)
        reviewer.handle_key(key.BACKSPACE)
        assert buffer.lines[1] == "e"
        reviewer.handle_key(key.ENTER)
        assert (buffer.line, buffer.column) == (2, 0)
        reviewer.handle_key(key.UP)
        reviewer.handle_key(key.HOME)
        assert (buffer.line, buffer.column) == (1, 0)

    # * Quit keys end the session
    @pytest.mark.parametrize("k", [key.ESC, key.CTRL_C, key.CTRL_Q])
    def test_quit(self, k):
        reviewer = _reviewer(["a"])
        assert reviewer.handle_key(k) is False
        assert reviewer.is_complete

    # * Replay stops at a quit key
    def test_replay_stops_at_quit(self):
        reviewer = _reviewer(["a", "b", "c"])
        reviewer.replay(["n", key.ESC, "n"])
        assert reviewer.state.buffer.lines == ["a", "#b", "c"]

    # * Ctrl-S calls the save hook
    def test_save(self):
        on_save = MagicMock()
        reviewer = _reviewer(["a"], on_save=on_save)
        reviewer.replay(["#", key.CTRL_S])
        on_save.assert_called_once_with(reviewer.state.buffer)
        assert reviewer.state.saved_count == 1
        assert reviewer.state.message == "Wrote untitled.txt"

    # * Without a save hook Ctrl-S only reports
    def test_save_disabled(self):
        reviewer = _reviewer(["a"])
        reviewer.handle_key(key.CTRL_S)
        assert reviewer.state.saved_count == 0
        assert "disabled" in reviewer.state.message

    # * Favourite lookups report into the footer message
    def test_lookup_message(self):
        strategy = MagicMock(return_value="Capital of Norway")
        reviewer = _reviewer(["#Oslo"], favourites=[strategy])
        reviewer.handle_key("s")
        assert reviewer.state.message == "Capital of Norway"


class TestRenderer:

    def _render(self, reviewer):
        console = Console(record=True, width=80, height=40, force_terminal=True)
        console.push_theme(get_marklist_theme())
        console.print(reviewer.render_screen())
        return console.export_text()

    # * Header, viewport & lighter all show up
    def test_screen_contents(self):
        reviewer = _reviewer(["#Alpha", "Beta", "?Gamma"])
        reviewer.replay("n")
        text = self._render(reviewer)
        assert "Reviewing: untitled.txt [modified]" in text
        assert "Line 2 of 3" in text
        assert "Alpha" in text and "Gamma" in text
        assert "Marklist [#2 ?1 !0] unmarked 0/3" in text

    # * Footer shows the last message
    def test_footer_message(self):
        reviewer = _reviewer(["a"])
        reviewer.replay("p")
        assert "Beginning of buffer" in self._render(reviewer)

    # * Only the viewport's lines are rendered
    def test_viewport_window(self):
        reviewer = _reviewer([f"line{i}" for i in range(30)], view_height=5)
        text = self._render(reviewer)
        assert "line4" in text
        assert "line5" not in text
