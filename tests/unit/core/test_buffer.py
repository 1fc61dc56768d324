# tests/unit/core/test_buffer.py
# Unit tests for the in-memory buffer & cursor

import re

import pytest

from marklist.core.buffer import Buffer


class TestFromText:

    # * Verify lines & trailing newline round-trip through text
    def test_text_round_trip(self):
        buffer = Buffer.from_text("a\nb\n")
        assert buffer.lines == ["a", "b"]
        assert buffer.text == "a\nb\n"

    # * Verify missing trailing newline is preserved
    def test_no_trailing_newline(self):
        buffer = Buffer.from_text("a\nb")
        assert buffer.text == "a\nb"

    # * CRLF input keeps its terminator on the way back out
    def test_crlf_preserved(self):
        buffer = Buffer.from_text("a\r\nb\r\n")
        assert buffer.lines == ["a", "b"]
        assert buffer.newline == "\r\n"
        assert buffer.text == "a\r\nb\r\n"

    # * Only LF breaks lines; other separators stay inside their line
    @pytest.mark.parametrize("sep", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028", "\u2029", "\r"])
    def test_unicode_separators_not_split(self, sep):
        text = f"alpha\n{sep}\nbe{sep}ta\n"
        buffer = Buffer.from_text(text)
        assert buffer.lines == ["alpha", sep, f"be{sep}ta"]
        assert buffer.text == text

    # * Mixed line endings fall back to LF & keep the stray CR in its line
    def test_mixed_endings_lossless(self):
        text = "a\r\nb\nc\r\n"
        buffer = Buffer.from_text(text)
        assert buffer.newline == "\n"
        assert buffer.lines == ["a\r", "b", "c\r"]
        assert buffer.text == text

    # * Empty text gives one empty line
    def test_empty_text(self):
        buffer = Buffer.from_text("")
        assert buffer.lines == [""]
        assert buffer.text == ""


class TestCursor:

    # * forward_line lands on column 0 & refuses to leave the buffer
    def test_forward_line_bounds(self):
        buffer = Buffer(lines=["one", "two"], column=2)
        assert buffer.forward_line(1) is True
        assert (buffer.line, buffer.column) == (1, 0)
        assert buffer.forward_line(1) is False
        assert buffer.line == 1
        assert buffer.forward_line(-5) is False
        assert buffer.forward_line(-1) is True
        assert buffer.is_first_line

    # * goto_line & set_column clamp to the buffer
    def test_clamping(self):
        buffer = Buffer(lines=["one", "two"])
        buffer.goto_line(99)
        assert buffer.is_last_line
        buffer.set_column(99)
        assert buffer.column == 3
        buffer.move_column(-10)
        assert buffer.at_line_start

    # * Verify constructor clamps an out-of-range cursor
    def test_constructor_clamps_cursor(self):
        buffer = Buffer(lines=["ab"], line=5, column=9)
        assert (buffer.line, buffer.column) == (0, 2)


class TestMutation:

    # * insert advances the cursor & sets modified
    def test_insert(self):
        buffer = Buffer(lines=["held"], column=2)
        buffer.insert("XY")
        assert buffer.current_line == "heXYld"
        assert buffer.column == 4
        assert buffer.modified

    # * Line breaks can't be inserted into a line
    def test_insert_rejects_line_breaks(self):
        with pytest.raises(ValueError):
            Buffer().insert("a\nb")

    # * delete_chars is bounded by end of line
    def test_delete_chars_bounded(self):
        buffer = Buffer(lines=["abc"], column=1)
        assert buffer.delete_chars(10) == 2
        assert buffer.current_line == "a"

    # * Backspace at column 0 does nothing
    def test_delete_backward_char(self):
        buffer = Buffer(lines=["abc"], column=2)
        assert buffer.delete_backward_char() is True
        assert buffer.current_line == "ac"
        buffer.beginning_of_line()
        assert buffer.delete_backward_char() is False

    # * replace_prefix swaps the start of the line & resets the column
    def test_replace_prefix(self):
        buffer = Buffer(lines=["?item"], column=3)
        buffer.replace_prefix(1, "#")
        assert buffer.current_line == "#item"
        assert buffer.column == 0


class TestSearch:

    # * search_in_line starts at the cursor & only moves when asked
    def test_search_in_line(self):
        pattern = re.compile(r"\d+")
        buffer = Buffer(lines=["a1 b22"], column=3)
        match = buffer.search_in_line(pattern)
        assert match.group(0) == "22"
        assert buffer.column == 3
        buffer.search_in_line(pattern, move=True)
        assert buffer.column == 4

    # * Search never crosses into the next line
    def test_search_bounded_by_line(self):
        buffer = Buffer(lines=["abc", "123"])
        assert buffer.search_in_line(re.compile(r"\d")) is None
