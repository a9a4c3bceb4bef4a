"""pulsar-plots: contribution-calendar pulse grids for matplotlib."""

from .calendar import sample_contributions, series
from .charts import chart, core, figure, save
from .errors import InvalidLayout, InvalidStyle, PulsarError
from .layout import Grid, Layout, Pulse, draw_layout, grid, layout, render
from .model import Alpha, AlphaSize, Shape, Size, parse_shape, parse_style, resolve
from .surface import AxesSurface, RecordingSurface
from .theme import COLORS, DEFAULTS, LAYOUT, PULSE_COLORS

__all__ = [
    "chart",
    "core",
    "figure",
    "save",
    "layout",
    "render",
    "draw_layout",
    "grid",
    "resolve",
    "parse_shape",
    "parse_style",
    "series",
    "sample_contributions",
    "Alpha",
    "AlphaSize",
    "AxesSurface",
    "Grid",
    "Layout",
    "Pulse",
    "RecordingSurface",
    "Shape",
    "Size",
    "InvalidLayout",
    "InvalidStyle",
    "PulsarError",
    "COLORS",
    "DEFAULTS",
    "LAYOUT",
    "PULSE_COLORS",
]
