# marklist/mark_io/console.py
# Centralized console shared by every Marklist module
#
# - A bare Console() is created at import time; the theme is pushed later by app.py:main_callback()
# - The proxy lets tests swap the underlying Console w/out breaking module-level `console` imports
# - Tests: use reset_console() for isolation or patch `marklist.mark_io.console.console`

from __future__ import annotations

from typing import Any

from rich.console import Console


# proxy forwarding every attribute to the wrapped Console
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()


# * Re-push the theme after settings change (e.g. `marklist config set theme ...`)
def refresh_theme() -> None:
    # ! import here to avoid circular dependency w/ ui module
    from ..ui.theming.console_theme import refresh_theme as _refresh_theme

    _refresh_theme()


__all__ = [
    "console",
    "reset_console",
    "refresh_theme",
]
