# marklist/ui/core/rich_components.py
# Centralized Rich component imports shared by the UI modules

from __future__ import annotations

from rich.align import Align
from rich.console import RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

__all__ = [
    "Align",
    "RenderableType",
    "Layout",
    "Live",
    "Panel",
    "Table",
    "Text",
    "Theme",
]
