"""Convenience chart functions: core(), chart(), figure(), save()."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Mapping

import matplotlib.pyplot as plt
from numpy.typing import ArrayLike

from . import calendar, theme
from .layout import Layout, draw_layout, layout
from .model import Alpha, Shape, Style, parse_shape
from .style import apply
from .surface import AxesSurface, Color, Point, prepare_axes
from .theme import DEFAULTS

logger = logging.getLogger(__name__)

# Default output directory (relative to the working directory)
_CHARTS_DIR = Path("charts")


def _ensure_style() -> None:
    """Apply the pulsar style if not already applied."""
    apply()


def figure(
    canvas_size: Point | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair whose axes span a W x H canvas.

    Without ``canvas_size`` the canvas is the figure's own pixel size.
    """
    _ensure_style()
    fig = plt.figure(figsize=figsize)
    ax = fig.add_axes((0, 0, 1, 1))
    if canvas_size is None:
        canvas_size = theme.canvas_size(tuple(fig.get_size_inches()), fig.dpi)
    prepare_axes(ax, canvas_size)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to ./charts/ (or a custom directory).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else _CHARTS_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved chart to %s", path)
    return path


def core(
    values: ArrayLike,
    *,
    shape: Shape | str = DEFAULTS["shape"],
    color: Color = DEFAULTS["color"],
    style: Style | str = Alpha(),
    row_count: int = DEFAULTS["row_count"],
    row_start: int = 0,
    padding: float = DEFAULTS["padding"],
    canvas_size: Point | None = None,
    figsize: tuple[float, float] | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
) -> tuple[plt.Figure, plt.Axes, Layout]:
    """Pulse grid of already-normalized values.

    The layout is computed before the figure is created, so an InvalidLayout
    leaves no half-drawn chart behind.
    """
    shape = parse_shape(shape)
    if canvas_size is None:
        canvas_size = theme.canvas_size(figsize)

    result = layout(
        values,
        style,
        row_count=row_count,
        row_start=row_start,
        padding=padding,
        canvas_size=canvas_size,
    )

    fig, ax = figure(canvas_size=canvas_size, figsize=figsize)
    draw_layout(AxesSurface(ax), result, shape, color)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax, result


def chart(
    contributions: Mapping[date, int],
    *,
    shape: Shape | str = Shape.SQUARE,
    color: Color = DEFAULTS["color"],
    style: Style | str = Alpha(),
    padding: float = DEFAULTS["padding"],
    week_start: str = DEFAULTS["week_start"],
    canvas_size: Point | None = None,
    figsize: tuple[float, float] | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
) -> tuple[plt.Figure, plt.Axes, Layout]:
    """Contribution calendar: one column per week, one row per weekday."""
    prepared = calendar.series(contributions, week_start)
    return core(
        prepared.values,
        shape=shape,
        color=color,
        style=style,
        row_count=7,
        row_start=prepared.row_start,
        padding=padding,
        canvas_size=canvas_size,
        figsize=figsize,
        filename=filename,
        output_dir=output_dir,
    )
