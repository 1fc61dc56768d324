# marklist/ui/theming/theme_engine.py
# Theme engine: accent colors from the active theme, gradient text & the Rich Theme

from __future__ import annotations

from ..core.rich_components import Text, Theme
from .theme_definitions import DEFAULT_THEME, THEMES


# * Palette for the configured theme (falls back to the default on unknown names)
def get_active_theme() -> list[str]:
    from ...config.settings import settings_manager

    name = getattr(settings_manager.load(), "theme", DEFAULT_THEME)
    return THEMES.get(name, THEMES[DEFAULT_THEME])


# * Static status colors + accessors for theme-dependent accents
class MarklistColors:
    SUCCESS = "#10b981"  # emerald green
    WARNING = "#ffaa00"  # amber
    ERROR = "#ff4444"  # red
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"  # dim cyan
    # unmarked lines stand out against marked ones
    UNMARKED = "bold"
    MARKED = "#aaaaaa"

    @staticmethod
    def gradient() -> list[str]:
        return get_active_theme()

    @classmethod
    def accent(cls) -> str:
        return cls.gradient()[0]

    @classmethod
    def accent2(cls) -> str:
        return cls.gradient()[2]

    @classmethod
    def accent_deep(cls) -> str:
        return cls.gradient()[-1]


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def _lerp_color(a_hex: str, b_hex: str, t: float) -> str:
    a = _hex_to_rgb(a_hex)
    b = _hex_to_rgb(b_hex)
    r, g, bl = (int(round(x + (y - x) * t)) for x, y in zip(a, b))
    return f"#{r:02x}{g:02x}{bl:02x}"


# * Per-character gradient across the given color stops
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    colors = colors or MarklistColors.gradient()
    if not text or len(colors) < 2:
        return Text(text, style=colors[0] if colors else "")

    result = Text()
    last = len(text) - 1
    stops = len(colors) - 1
    for i, char in enumerate(text):
        pos = (i / last if last else 0.0) * stops
        idx = min(int(pos), stops - 1)
        result.append(char, style=_lerp_color(colors[idx], colors[idx + 1], pos - idx))
    return result


def success_gradient(text: str) -> Text:
    return natural_gradient(text, [MarklistColors.SUCCESS, "#059669", "#047857"])


def accent_gradient(text: str) -> Text:
    palette = MarklistColors.gradient()
    return natural_gradient(text, [palette[0], palette[2], palette[-1]])


# * Rich theme w/ semantic & marklist-specific styles for the current palette
def get_marklist_theme() -> Theme:
    return Theme(
        {
            "success": MarklistColors.SUCCESS,
            "warning": MarklistColors.WARNING,
            "error": MarklistColors.ERROR,
            "dim": MarklistColors.DIM,
            "debug": MarklistColors.DEBUG,
            "marklist.accent": MarklistColors.accent(),
            "marklist.accent2": MarklistColors.accent2(),
            "marklist.accent_deep": MarklistColors.accent_deep(),
            "marklist.marked": MarklistColors.MARKED,
            "marklist.unmarked": MarklistColors.UNMARKED,
            "marklist.cursor": f"reverse {MarklistColors.accent()}",
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=MarklistColors.SUCCESS)


def styled_arrow() -> Text:
    return Text("->", style=MarklistColors.accent2())


def styled_bullet() -> Text:
    return Text("•", style=MarklistColors.accent2())
