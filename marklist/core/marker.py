# marklist/core/marker.py
# Line marker operations: toggle, advance-and-mark, next-unmarked navigation & item lookup helpers
#
# Every operation takes the buffer & alphabet explicitly. Operations bound to keys
# require the cursor at column 0; callers fall back to self_insert() otherwise.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .alphabet import MarkAlphabet
from .buffer import Buffer
from .exceptions import AlphabetError
from .patterns import ITEM_PATTERN
from .verbose import vlog_mark
from ..lookup.dispatch import LookupStrategy, favourite_search


# * Outcome of a mark toggle
class MarkChange(Enum):
    ADDED = "added"
    REMOVED = "removed"
    REPLACED = "replaced"
    INSERTED_TEXT = "inserted_text"


# * Next-unmarked navigation strategies
class NavigationVariant(Enum):
    # skip the marked run explicitly; no-op from an unmarked line
    SCAN = "scan"
    # search for the first unmarked line at/after the cursor, then step back
    SEARCH = "search"


@dataclass(slots=True)
class AdvanceResult:
    moved: bool
    newly_marked: bool
    line: int
    lookup: str = ""


@dataclass(slots=True)
class NavigationResult:
    moved: bool
    line: int
    # False when the search variant found no unmarked line below
    found: bool = True


@dataclass(slots=True)
class MarkSummary:
    total: int
    unmarked: int
    per_glyph: dict[str, int]
    first_unmarked: int | None

    @property
    def marked(self) -> int:
        return self.total - self.unmarked


# ===== MARK QUERY =====


def is_marked(line: str, alphabet: MarkAlphabet) -> bool:
    return alphabet.is_marked(line)


# ===== SELF-INSERT FALLBACK =====


# * Literal insertion at the cursor, used when a mark key is pressed away from column 0
def self_insert(buffer: Buffer, text: str) -> None:
    buffer.insert(text)


# ===== MARK TOGGLE =====


def toggle_mark(buffer: Buffer, alphabet: MarkAlphabet, key: str) -> MarkChange:
    glyph = alphabet.glyph_for(key)
    if glyph is None:
        raise AlphabetError(f"No mark bound to key {key!r}")

    if not buffer.at_line_start:
        self_insert(buffer, glyph)
        return MarkChange.INSERTED_TEXT

    existing = alphabet.leading_glyph(buffer.current_line)
    if existing == glyph:
        buffer.delete_chars(len(glyph))
        change = MarkChange.REMOVED
    elif existing is not None:
        buffer.replace_prefix(len(existing), glyph)
        change = MarkChange.REPLACED
    else:
        buffer.replace_prefix(0, glyph)
        change = MarkChange.ADDED

    buffer.beginning_of_line()
    vlog_mark(change.value, buffer.line, f"glyph={glyph!r}")
    return change


# ===== AUTO-MARK-ON-ADVANCE =====


# * Move down one line, center it & add the default mark only if the line is unmarked
def mark_and_advance(buffer: Buffer, alphabet: MarkAlphabet) -> AdvanceResult:
    if not buffer.at_line_start or not buffer.forward_line(1):
        return AdvanceResult(moved=False, newly_marked=False, line=buffer.line)

    buffer.recenter()
    if alphabet.is_marked(buffer.current_line):
        return AdvanceResult(moved=True, newly_marked=False, line=buffer.line)

    buffer.replace_prefix(0, alphabet.default_glyph)
    vlog_mark(MarkChange.ADDED.value, buffer.line, "advance")
    return AdvanceResult(moved=True, newly_marked=True, line=buffer.line)


# * Same as mark_and_advance, plus a favourite search for lines that were just marked
def mark_and_advance_and_search(
    buffer: Buffer,
    alphabet: MarkAlphabet,
    strategies: Sequence[LookupStrategy],
) -> AdvanceResult:
    result = mark_and_advance(buffer, alphabet)
    if result.newly_marked:
        result.lookup = favourite_search(extract_item(buffer), strategies)
    return result


# ===== NAVIGATION =====


def previous_line(buffer: Buffer) -> bool:
    if not buffer.at_line_start:
        return False
    return buffer.forward_line(-1)


def next_unmarked(
    buffer: Buffer,
    alphabet: MarkAlphabet,
    variant: NavigationVariant = NavigationVariant.SCAN,
) -> NavigationResult:
    """Move to the last marked line before the next unmarked one.

    SCAN leaves the cursor alone when the current line is unmarked; otherwise it
    walks the contiguous marked run & stops on its last line (the buffer's last
    line when the run reaches the end). SEARCH looks for the first unmarked line
    at or after the cursor line & steps back one line, so from an unmarked line
    it moves up; when nothing unmarked follows, the cursor stays put.
    """
    start = buffer.line
    if not buffer.at_line_start:
        return NavigationResult(moved=False, line=start)

    if variant is NavigationVariant.SEARCH:
        target = _first_unmarked_from(buffer.lines, alphabet, start)
        if target is None:
            return NavigationResult(moved=False, line=start, found=False)
        buffer.goto_line(max(target - 1, 0))
        return NavigationResult(moved=buffer.line != start, line=buffer.line)

    if not alphabet.is_marked(buffer.current_line):
        return NavigationResult(moved=False, line=start)

    index = start
    while index + 1 < buffer.line_count and alphabet.is_marked(buffer.lines[index + 1]):
        index += 1
    buffer.goto_line(index)
    return NavigationResult(moved=index != start, line=index)


def _first_unmarked_from(lines: Sequence[str], alphabet: MarkAlphabet, start: int) -> int | None:
    for index in range(start, len(lines)):
        if not alphabet.is_marked(lines[index]):
            return index
    return None


# ===== ITEMS =====


# * First item on the current line from the cursor on; cursor & text untouched
def extract_item(buffer: Buffer) -> str | None:
    match = buffer.search_in_line(ITEM_PATTERN)
    return match.group(0) if match else None


# * Move the cursor to the start of the line's first item
def jump_to_item(buffer: Buffer) -> bool:
    if not buffer.at_line_start:
        return False
    return buffer.search_in_line(ITEM_PATTERN, move=True) is not None


# ===== SUMMARY =====


def summarize(lines: Sequence[str], alphabet: MarkAlphabet) -> MarkSummary:
    per_glyph = {glyph: 0 for glyph in alphabet.glyphs}
    unmarked = 0
    first_unmarked: int | None = None
    for index, text in enumerate(lines):
        glyph = alphabet.leading_glyph(text)
        if glyph is None:
            unmarked += 1
            if first_unmarked is None:
                first_unmarked = index
        else:
            per_glyph[glyph] += 1
    return MarkSummary(
        total=len(lines),
        unmarked=unmarked,
        per_glyph=per_glyph,
        first_unmarked=first_unmarked,
    )
