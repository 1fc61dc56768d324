# marklist/ui/theming/console_theme.py
# Push & refresh the Marklist Rich theme on the shared console

from __future__ import annotations

from rich.theme import ThemeStackError

from ...mark_io.console import console


# * Replace the pushed theme after a theme setting change
def refresh_theme() -> None:
    from .theme_engine import get_marklist_theme

    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_marklist_theme())
