# marklist/ui/theming/theme_definitions.py
# Accent palettes for the Marklist CLI & review screen

from __future__ import annotations


# five accent stops per theme, lightest-to-deepest order is not required
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "forest_night": [
        "#bbf7d0",  # pale mint
        "#86efac",  # light green
        "#22c55e",  # emerald
        "#16a34a",  # green
        "#166534",  # deep green
    ],
    "sunset_coral": [
        "#FF7F50",  # coral
        "#FF8C69",  # salmon
        "#FFA500",  # orange
        "#FFB347",  # peach
        "#FFD700",  # gold
    ],
    "graphite_cyan": [
        "#e5e7eb",  # light slate
        "#9ca3af",  # slate
        "#22d3ee",  # cyan
        "#06b6d4",  # teal cyan
        "#0e7490",  # deep cyan
    ],
    "twilight_orchid": [
        "#ede9fe",  # pale lavender
        "#c4b5fd",  # soft violet
        "#a78bfa",  # light purple
        "#8b5cf6",  # violet
        "#4c1d95",  # indigo
    ],
}

DEFAULT_THEME = "deep_blue"
