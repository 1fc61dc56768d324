# marklist/ui/theming/styled_helpers.py
# Pre-composed styling helpers for config & status output

from __future__ import annotations

import json
from typing import Any

from rich.markup import escape

from .theme_engine import styled_arrow, styled_bullet, styled_checkmark, success_gradient


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + gradient label [+ arrow + value], for console.print(*result)."""
    parts: list[Any] = [styled_checkmark(), success_gradient(label)]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    return [styled_bullet(), f"[bold]{key}[/]", "[marklist.accent2]->", value]


def format_setting_value(value: Any) -> str:
    if isinstance(value, str):
        return f'[marklist.accent2]"{escape(value)}"[/]'
    elif isinstance(value, bool):
        return f"[marklist.accent2]{str(value).lower()}[/]"
    elif isinstance(value, (int, float)):
        return f"[marklist.accent2]{value}[/]"
    else:
        return f"[marklist.accent2]{escape(json.dumps(value, ensure_ascii=False))}[/]"
