# marklist/core/commands.py
# Explicit key -> handler dispatch table over a mark session (replaces host-editor keybindings)

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Sequence

from .alphabet import MarkAlphabet
from .buffer import Buffer
from .exceptions import KeymapError
from .marker import (
    MarkChange,
    NavigationVariant,
    extract_item,
    jump_to_item,
    mark_and_advance,
    mark_and_advance_and_search,
    next_unmarked,
    previous_line,
    self_insert,
    toggle_mark,
)
from ..lookup.dispatch import LookupStrategy, favourite_search


# * Fixed set of bindable actions
class Action(Enum):
    ADVANCE_AND_MARK = "advance_and_mark"
    ADVANCE_AND_MARK_AND_SEARCH = "advance_and_mark_and_search"
    PREVIOUS_LINE = "previous_line"
    NEXT_UNMARKED = "next_unmarked"
    JUMP_TO_ITEM = "jump_to_item"
    SEARCH_FAVOURITES = "search_favourites"
    SEARCH_ABSTRACT_A = "search_abstract_a"
    SEARCH_ABSTRACT_B = "search_abstract_b"
    SEARCH_BROWSER = "search_browser"
    SEARCH_DICTIONARY = "search_dictionary"


DEFAULT_ACTION_KEYS: dict[str, str] = {
    Action.ADVANCE_AND_MARK.value: "n",
    Action.ADVANCE_AND_MARK_AND_SEARCH.value: "N",
    Action.PREVIOUS_LINE.value: "p",
    Action.NEXT_UNMARKED.value: "u",
    Action.JUMP_TO_ITEM.value: "e",
    Action.SEARCH_FAVOURITES.value: "s",
    Action.SEARCH_ABSTRACT_A.value: "d",
    Action.SEARCH_ABSTRACT_B.value: "w",
    Action.SEARCH_BROWSER.value: "b",
    Action.SEARCH_DICTIONARY.value: "l",
}


# * Validated action -> key bindings
class Keymap:

    def __init__(
        self,
        action_keys: Mapping[str, str] | None = None,
        alphabet: MarkAlphabet | None = None,
    ):
        merged = dict(DEFAULT_ACTION_KEYS)
        for name, key in (action_keys or {}).items():
            try:
                Action(name)
            except ValueError:
                raise KeymapError(f"Unknown action '{name}'") from None
            merged[name] = key

        by_key: dict[str, Action] = {}
        for name, key in merged.items():
            if not isinstance(key, str) or len(key) != 1:
                raise KeymapError(f"Key for '{name}' must be a single character, got {key!r}")
            if key in by_key:
                raise KeymapError(
                    f"Key {key!r} is bound to both '{by_key[key].value}' and '{name}'"
                )
            if alphabet is not None and key in alphabet:
                raise KeymapError(f"Key {key!r} for '{name}' is already a mark key")
            by_key[key] = Action(name)

        self._by_key = by_key

    def action_for(self, key: str) -> Action | None:
        return self._by_key.get(key)

    def key_for(self, action: Action) -> str:
        for key, bound in self._by_key.items():
            if bound is action:
                return key
        raise KeymapError(f"No key bound to '{action.value}'")

    def items(self) -> list[tuple[str, Action]]:
        return list(self._by_key.items())


# * Everything a keystroke handler may touch
@dataclass
class MarkSession:
    buffer: Buffer
    alphabet: MarkAlphabet = field(default_factory=MarkAlphabet)
    keymap: Keymap | None = None
    navigation: NavigationVariant = NavigationVariant.SCAN
    favourites: Sequence[LookupStrategy] = ()
    # single-strategy lookups keyed by action
    lookups: Mapping[Action, LookupStrategy] = field(default_factory=dict)
    # last report line; every command overwrites it (last write wins)
    message: str = ""

    def __post_init__(self) -> None:
        if self.keymap is None:
            self.keymap = Keymap(alphabet=self.alphabet)

    def report(self, text: str) -> None:
        self.message = text


Handler = Callable[[MarkSession, str], None]


# ===== HANDLERS =====
# each handler receives the session & the key that triggered it


def _handle_mark(session: MarkSession, key: str) -> None:
    change = toggle_mark(session.buffer, session.alphabet, key)
    if change is not MarkChange.INSERTED_TEXT:
        session.report(f"Mark {change.value}")


# * Column-0 guard: away from column 0 an action key is just typed text
def _guarded(handler: Handler) -> Handler:
    @functools.wraps(handler)
    def wrapper(session: MarkSession, key: str) -> None:
        if not session.buffer.at_line_start:
            self_insert(session.buffer, key)
            return
        handler(session, key)

    return wrapper


@_guarded
def _handle_advance(session: MarkSession, key: str) -> None:
    result = mark_and_advance(session.buffer, session.alphabet)
    session.report("" if result.moved else "End of buffer")


@_guarded
def _handle_advance_search(session: MarkSession, key: str) -> None:
    result = mark_and_advance_and_search(
        session.buffer, session.alphabet, session.favourites
    )
    if not result.moved:
        session.report("End of buffer")
    else:
        session.report(result.lookup)


@_guarded
def _handle_previous(session: MarkSession, key: str) -> None:
    moved = previous_line(session.buffer)
    session.report("" if moved else "Beginning of buffer")


@_guarded
def _handle_next_unmarked(session: MarkSession, key: str) -> None:
    result = next_unmarked(session.buffer, session.alphabet, session.navigation)
    session.report("" if result.found else "No unmarked line below")


@_guarded
def _handle_jump(session: MarkSession, key: str) -> None:
    jump_to_item(session.buffer)
    session.report("")


@_guarded
def _handle_favourites(session: MarkSession, key: str) -> None:
    session.report(favourite_search(extract_item(session.buffer), session.favourites))


def _single_lookup(action: Action) -> Handler:
    @_guarded
    def handler(session: MarkSession, key: str) -> None:
        strategy = session.lookups.get(action)
        strategies = [strategy] if strategy is not None else []
        session.report(favourite_search(extract_item(session.buffer), strategies))

    return handler


ACTION_HANDLERS: dict[Action, Handler] = {
    Action.ADVANCE_AND_MARK: _handle_advance,
    Action.ADVANCE_AND_MARK_AND_SEARCH: _handle_advance_search,
    Action.PREVIOUS_LINE: _handle_previous,
    Action.NEXT_UNMARKED: _handle_next_unmarked,
    Action.JUMP_TO_ITEM: _handle_jump,
    Action.SEARCH_FAVOURITES: _handle_favourites,
    Action.SEARCH_ABSTRACT_A: _single_lookup(Action.SEARCH_ABSTRACT_A),
    Action.SEARCH_ABSTRACT_B: _single_lookup(Action.SEARCH_ABSTRACT_B),
    Action.SEARCH_BROWSER: _single_lookup(Action.SEARCH_BROWSER),
    Action.SEARCH_DICTIONARY: _single_lookup(Action.SEARCH_DICTIONARY),
}


# * Key -> handler table bound to one session
class CommandTable:

    def __init__(self, session: MarkSession, handlers: Mapping[str, Handler]):
        self.session = session
        self._handlers = dict(handlers)

    @classmethod
    def from_session(cls, session: MarkSession) -> "CommandTable":
        handlers: dict[str, Handler] = {key: _handle_mark for key in session.alphabet}
        keymap = session.keymap or Keymap(alphabet=session.alphabet)
        for key, action in keymap.items():
            handlers[key] = ACTION_HANDLERS[action]
        return cls(session, handlers)

    def __contains__(self, key: object) -> bool:
        return key in self._handlers

    def keys(self) -> list[str]:
        return list(self._handlers)

    # * Run the handler bound to key; False for unbound keys
    def dispatch(self, key: str) -> bool:
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler(self.session, key)
        return True
