# marklist/cli/helpers.py
# Shared CLI helpers: test-environment detection & mark session assembly

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ..core.commands import Action, MarkSession
from ..lookup.providers.factory import build_lookup, favourite_strategies

if TYPE_CHECKING:
    from ..config.settings import MarklistSettings
    from ..core.buffer import Buffer

# single-provider lookup actions & the provider each one runs
ACTION_PROVIDERS: dict[Action, str] = {
    Action.SEARCH_ABSTRACT_A: "duckduckgo",
    Action.SEARCH_ABSTRACT_B: "wikipedia",
    Action.SEARCH_BROWSER: "browser",
    Action.SEARCH_DICTIONARY: "lexin",
}


# * Detect if running in test environment to avoid TTY-dependent features
def is_test_environment() -> bool:
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True

    # typer test runner indicators
    if os.environ.get("NO_COLOR") == "1" and os.environ.get("TERM") == "dumb":
        return True

    return "PYTEST_VERSION" in os.environ


# * Wire a buffer to the configured alphabet, keymap, navigation & lookups
def build_session(settings: "MarklistSettings", buffer: "Buffer") -> MarkSession:
    return MarkSession(
        buffer=buffer,
        alphabet=settings.alphabet,
        keymap=settings.keymap,
        navigation=settings.navigation_variant,
        favourites=favourite_strategies(settings),
        lookups={
            action: build_lookup(name, settings)
            for action, name in ACTION_PROVIDERS.items()
        },
    )
