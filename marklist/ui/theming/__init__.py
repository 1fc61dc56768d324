# marklist/ui/theming/__init__.py
# Theming utilities: palettes, Rich theme & styled output helpers

from .theme_definitions import THEMES, DEFAULT_THEME
from .theme_engine import (
    MarklistColors,
    get_active_theme,
    get_marklist_theme,
    natural_gradient,
    success_gradient,
    accent_gradient,
)
from .console_theme import refresh_theme

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "MarklistColors",
    "get_active_theme",
    "get_marklist_theme",
    "natural_gradient",
    "success_gradient",
    "accent_gradient",
    "refresh_theme",
]
