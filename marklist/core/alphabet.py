# marklist/core/alphabet.py
# Mark alphabet: ordered trigger key -> glyph bindings w/ validation & line classification

from __future__ import annotations

from typing import Iterator, Mapping

from .exceptions import AlphabetError


# default bindings; first entry is the glyph used by advance-and-mark
DEFAULT_MARKS: dict[str, str] = {
    "#": "#",
    "?": "?",
    "!": "!",
}


# * Immutable, validated set of mark bindings
class MarkAlphabet:
    """Ordered mapping from single trigger keys to mark glyphs.

    The first binding's glyph is the default mark. Glyphs are unique so that a
    marked line can always be attributed to exactly one binding; when glyphs share
    a prefix the longest one is matched.
    """

    __slots__ = ("_marks", "_by_length")

    def __init__(self, marks: Mapping[str, str] | None = None):
        items = list((DEFAULT_MARKS if marks is None else marks).items())
        _validate(items)
        self._marks: dict[str, str] = dict(items)
        # longest first so "##" wins over "#"
        self._by_length: tuple[str, ...] = tuple(
            sorted(self._marks.values(), key=len, reverse=True)
        )

    @property
    def default_glyph(self) -> str:
        return next(iter(self._marks.values()))

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._marks)

    @property
    def glyphs(self) -> tuple[str, ...]:
        return tuple(self._marks.values())

    def glyph_for(self, key: str) -> str | None:
        return self._marks.get(key)

    def items(self) -> list[tuple[str, str]]:
        return list(self._marks.items())

    # * Glyph prefixing the line, or None when the line is unmarked
    def leading_glyph(self, line: str) -> str | None:
        for glyph in self._by_length:
            if line.startswith(glyph):
                return glyph
        return None

    def is_marked(self, line: str) -> bool:
        return self.leading_glyph(line) is not None

    def as_dict(self) -> dict[str, str]:
        return dict(self._marks)

    def __contains__(self, key: object) -> bool:
        return key in self._marks

    def __iter__(self) -> Iterator[str]:
        return iter(self._marks)

    def __len__(self) -> int:
        return len(self._marks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarkAlphabet):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"MarkAlphabet({self._marks!r})"


def _validate(items: list[tuple[str, str]]) -> None:
    if not items:
        raise AlphabetError("Mark alphabet must contain at least one binding")

    seen: dict[str, str] = {}
    for key, glyph in items:
        if not isinstance(key, str) or len(key) != 1:
            raise AlphabetError(f"Mark key must be a single character, got {key!r}")
        if not isinstance(glyph, str) or not glyph:
            raise AlphabetError(f"Glyph for key {key!r} must be a non-empty string")
        if "\n" in glyph or "\r" in glyph:
            raise AlphabetError(f"Glyph for key {key!r} must not contain line breaks")
        if glyph in seen:
            raise AlphabetError(
                f"Glyph {glyph!r} is bound to both {seen[glyph]!r} and {key!r}"
            )
        seen[glyph] = key
