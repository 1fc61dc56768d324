# tests/unit/core/test_commands.py
# Unit tests for keymap validation & the key -> handler dispatch table

from unittest.mock import MagicMock

import pytest

from marklist.core.alphabet import MarkAlphabet
from marklist.core.buffer import Buffer
from marklist.core.commands import (
    DEFAULT_ACTION_KEYS,
    Action,
    CommandTable,
    Keymap,
    MarkSession,
)
from marklist.core.exceptions import KeymapError
from marklist.core.marker import NavigationVariant


def _table(lines, **session_kwargs):
    session = MarkSession(buffer=Buffer(lines=list(lines)), **session_kwargs)
    return session, CommandTable.from_session(session)


class TestKeymap:

    # * Defaults bind every action
    def test_defaults(self):
        keymap = Keymap()
        assert {a for _, a in keymap.items()} == set(Action)
        assert keymap.action_for("n") is Action.ADVANCE_AND_MARK
        assert keymap.key_for(Action.SEARCH_DICTIONARY) == "l"

    # * Overrides merge w/ defaults
    def test_override(self):
        keymap = Keymap({"previous_line": "k"})
        assert keymap.action_for("k") is Action.PREVIOUS_LINE
        assert keymap.action_for("p") is None

    # * Invalid bindings raise KeymapError
    @pytest.mark.parametrize(
        "action_keys",
        [
            {"fly": "f"},
            {"previous_line": "pp"},
            {"previous_line": "n"},
        ],
    )
    def test_invalid(self, action_keys):
        with pytest.raises(KeymapError):
            Keymap(action_keys)

    # * Action keys can't shadow mark keys
    def test_collision_with_mark_keys(self):
        with pytest.raises(KeymapError):
            Keymap({"previous_line": "#"}, MarkAlphabet())

    # * Every default action key is a single character
    def test_default_keys_single_char(self):
        assert all(len(k) == 1 for k in DEFAULT_ACTION_KEYS.values())


class TestDispatch:

    # * Unbound keys report False & change nothing
    def test_unbound_key(self):
        session, table = _table(["a"])
        assert table.dispatch("z") is False
        assert session.buffer.lines == ["a"]
        assert "z" not in table

    # * Mark keys toggle & report the change
    def test_mark_key(self):
        session, table = _table(["a"])
        assert table.dispatch("?") is True
        assert session.buffer.lines == ["?a"]
        assert session.message == "Mark added"

    # * Advance key marks the next line; the last line reports end of buffer
    def test_advance(self):
        session, table = _table(["a", "b"])
        table.dispatch("n")
        assert session.buffer.lines == ["a", "#b"]
        assert session.message == ""
        table.dispatch("n")
        assert session.message == "End of buffer"

    # * Action keys off column 0 insert themselves
    def test_action_key_self_inserts(self):
        session, table = _table(["ab", "c"])
        session.buffer.set_column(1)
        table.dispatch("n")
        assert session.buffer.lines == ["anb", "c"]
        assert session.buffer.line == 0

    # * Toggle at column 3 inserts the glyph there & keeps the leading mark
    def test_mark_key_mid_line(self):
        session, table = _table(["#abcdef"])
        session.buffer.set_column(3)
        table.dispatch("!")
        assert session.buffer.lines == ["#ab!cdef"]

    # * Previous line reports at the top
    def test_previous(self):
        session, table = _table(["a", "b"])
        table.dispatch("p")
        assert session.message == "Beginning of buffer"

    # * Next unmarked uses the session's navigation variant
    def test_next_unmarked_variant(self):
        session, table = _table(
            ["#a", "b", "c"], navigation=NavigationVariant.SEARCH
        )
        session.buffer.goto_line(1)
        table.dispatch("u")
        assert session.buffer.line == 0

        session.buffer.lines[:] = ["#a", "#b"]
        table.dispatch("u")
        assert session.message == "No unmarked line below"

    # * Favourite search reports the first non-empty strategy result
    def test_favourites(self):
        first = MagicMock(return_value="")
        second = MagicMock(return_value="Capital of Norway")
        session, table = _table(["#Oslo"], favourites=[first, second])
        table.dispatch("s")
        assert session.message == "Capital of Norway"
        first.assert_called_once_with("Oslo")

    # * Single-provider lookups use the strategy bound to their action
    def test_single_lookup(self):
        wiki = MagicMock(return_value="extract")
        session, table = _table(["!Bergen"], lookups={Action.SEARCH_ABSTRACT_B: wiki})
        table.dispatch("w")
        assert session.message == "extract"
        wiki.assert_called_once_with("Bergen")

    # * Lookups w/o an item or w/o a strategy report an empty message
    def test_lookup_without_item_or_strategy(self):
        session, table = _table(["#123"], lookups={})
        session.message = "stale"
        table.dispatch("d")
        assert session.message == ""

    # * Advance-and-search reports the lookup for newly marked lines
    def test_advance_and_search(self):
        strategy = MagicMock(return_value="A city")
        session, table = _table(["#x", "Tromsø"], favourites=[strategy])
        table.dispatch("N")
        assert session.buffer.lines[1] == "#Tromsø"
        assert session.message == "A city"

    # * Jump moves to the first item
    def test_jump(self):
        session, table = _table(["#  Item"])
        table.dispatch("e")
        assert session.buffer.column == 3

    # * Custom keymap keys replace the defaults in the table
    def test_custom_keymap(self):
        alphabet = MarkAlphabet({"x": "✓"})
        keymap = Keymap({"advance_and_mark": "j"}, alphabet)
        session, table = _table(["a", "b"], alphabet=alphabet, keymap=keymap)
        assert "n" not in table
        table.dispatch("j")
        assert session.buffer.lines == ["a", "✓b"]
        table.dispatch("x")
        assert session.buffer.lines == ["a", "b"]
