# tests/unit/core/test_alphabet.py
# Unit tests for mark alphabet bindings & validation

import pytest

from marklist.core.alphabet import DEFAULT_MARKS, MarkAlphabet
from marklist.core.exceptions import AlphabetError, ConfigurationError


class TestDefaults:

    # * Verify default bindings & default glyph
    def test_default_alphabet(self):
        alphabet = MarkAlphabet()
        assert alphabet.as_dict() == DEFAULT_MARKS
        assert alphabet.default_glyph == "#"
        assert alphabet.keys == ("#", "?", "!")

    # * Verify first binding decides the default glyph
    def test_custom_default_glyph(self):
        alphabet = MarkAlphabet({"x": "✓", "o": "·"})
        assert alphabet.default_glyph == "✓"
        assert alphabet.glyph_for("o") == "·"
        assert alphabet.glyph_for("z") is None


class TestClassification:

    # * is_marked true iff the line starts with a glyph
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("#done", True),
            ("?unsure", True),
            ("!urgent", True),
            ("plain", False),
            (" #indented", False),
            ("", False),
        ],
    )
    def test_is_marked(self, line, expected):
        assert MarkAlphabet().is_marked(line) is expected

    # * Longest glyph wins when glyphs share a prefix
    def test_longest_glyph_wins(self):
        alphabet = MarkAlphabet({"a": "#", "b": "##"})
        assert alphabet.leading_glyph("##twice") == "##"
        assert alphabet.leading_glyph("#once") == "#"
        assert alphabet.leading_glyph("none") is None

    # * Verify container protocol on trigger keys
    def test_container_protocol(self):
        alphabet = MarkAlphabet()
        assert "#" in alphabet
        assert "n" not in alphabet
        assert list(alphabet) == ["#", "?", "!"]
        assert len(alphabet) == 3
        assert alphabet == MarkAlphabet(dict(DEFAULT_MARKS))


class TestValidation:

    # * Verify empty alphabet is rejected
    def test_empty_rejected(self):
        with pytest.raises(AlphabetError):
            MarkAlphabet({})

    # * Verify bad keys & glyphs are rejected
    @pytest.mark.parametrize(
        "marks",
        [
            {"ab": "#"},
            {"": "#"},
            {"a": ""},
            {"a": "#\n"},
            {"a": "#", "b": "#"},
        ],
    )
    def test_invalid_bindings(self, marks):
        with pytest.raises(AlphabetError):
            MarkAlphabet(marks)

    # * AlphabetError is both a ConfigurationError & a ValueError
    def test_error_hierarchy(self):
        with pytest.raises(ConfigurationError):
            MarkAlphabet({"a": "#", "b": "#"})
        with pytest.raises(ValueError):
            MarkAlphabet({"a": "#", "b": "#"})
