"""Pure data: palette, engine defaults, and figure layout constants.

No library imports, so hosts other than matplotlib can read the same values.
"""

from __future__ import annotations

# Pulse palette (the color picker choices), plus figure chrome
COLORS = {
    "black": "#000000",
    "red": "#FF0000",
    "blue": "#0000FF",
    "cyan": "#00FFFF",
    "green": "#00FF00",
    "magenta": "#FF00FF",
    "yellow": "#FFFF00",
    "bg": "#FFFFFF",
}

PULSE_COLORS = [
    COLORS["black"],
    COLORS["red"],
    COLORS["blue"],
    COLORS["cyan"],
    COLORS["green"],
    COLORS["magenta"],
    COLORS["yellow"],
]

# Engine defaults
DEFAULTS = {
    "shape": "squircle",
    "color": COLORS["blue"],
    "row_count": 7,       # one row per weekday
    "padding": 4.0,       # canvas units between neighbouring pulses
    "week_start": "sunday",
}

# Figure layout. The canvas is measured in pixels: figsize * dpi.
LAYOUT = {
    "figsize": (8.5, 1.4),    # 53 weeks x 7 days at ~12px per cell
    "dpi": 80,
}


def canvas_size(
    figsize: tuple[float, float] | None = None,
    dpi: float | None = None,
) -> tuple[float, float]:
    """Canvas (width, height) in pixels for a figure of ``figsize`` inches."""
    width, height = figsize or LAYOUT["figsize"]
    dpi = dpi or LAYOUT["dpi"]
    return width * dpi, height * dpi
