"""Pulse layout engine.

Values are placed column by column: each column holds ``row_count`` cells,
the first value lands in row ``row_start`` of column 0, and placement wraps
to the top of the next column after the last row. Every cell is a square of
side ``min(W / columns - padding, H / row_count - padding)``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike

from . import shapes
from .errors import InvalidLayout
from .model import Alpha, Shape, Style, parse_shape, parse_style, resolve
from .surface import Color, Point, Surface
from .theme import DEFAULTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    """Derived geometry shared by every cell of one layout."""

    count: int
    row_count: int
    row_start: int
    column_count: int
    padding: float
    cell_side: float

    @property
    def pitch(self) -> float:
        """Distance between the top-left corners of neighbouring cells."""
        return self.cell_side + self.padding

    @property
    def degenerate(self) -> bool:
        return not math.isfinite(self.cell_side) or self.cell_side <= 0


@dataclass(frozen=True)
class Pulse:
    """One placed and styled cell."""

    index: int
    value: float
    row: int
    column: int
    offset: Point
    side: float
    alpha: float
    size_scale: float


@dataclass(frozen=True)
class Layout:
    grid: Grid
    pulses: tuple[Pulse, ...]

    @property
    def degenerate(self) -> bool:
        return self.grid.degenerate

    def __len__(self) -> int:
        return len(self.pulses)

    def __iter__(self) -> Iterator[Pulse]:
        return iter(self.pulses)


def _check(row_count: int, row_start: int, padding: float, canvas_size: Point) -> None:
    details = {
        "row_count": row_count,
        "row_start": row_start,
        "padding": padding,
        "canvas_size": tuple(canvas_size),
    }
    if row_count < 1:
        raise InvalidLayout("row_count must be at least 1", details)
    if row_start >= row_count:
        raise InvalidLayout(
            f"row_start cannot be higher than row_count "
            f"(row_start: {row_start}, row_count: {row_count})",
            details,
        )
    if row_start < 0:
        raise InvalidLayout("row_start cannot be negative", details)
    if not math.isfinite(padding) or padding < 0:
        raise InvalidLayout("padding must be finite and non-negative", details)
    width, height = canvas_size
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
        raise InvalidLayout("canvas dimensions must be finite and positive", details)


def grid(
    count: int,
    *,
    row_count: int = DEFAULTS["row_count"],
    row_start: int = 0,
    padding: float = DEFAULTS["padding"],
    canvas_size: Point,
) -> Grid:
    """Compute column count and cell side for ``count`` values."""
    _check(row_count, row_start, padding, canvas_size)
    width, height = canvas_size

    column_count = math.ceil(count / row_count)
    row_side = height / row_count - padding
    if column_count:
        cell_side = min(width / column_count - padding, row_side)
    else:
        cell_side = row_side

    return Grid(
        count=count,
        row_count=row_count,
        row_start=row_start,
        column_count=column_count,
        padding=float(padding),
        cell_side=float(cell_side),
    )


def layout(
    values: ArrayLike,
    style: Style | str = Alpha(),
    *,
    row_count: int = DEFAULTS["row_count"],
    row_start: int = 0,
    padding: float = DEFAULTS["padding"],
    canvas_size: Point,
) -> Layout:
    """Place and style every value, preserving input order.

    Raises InvalidLayout before computing anything if the parameters admit
    no geometry. A layout whose cells come out with a non-positive side is
    returned with ``degenerate`` set and a warning logged.
    """
    style = parse_style(style)
    values = np.asarray(values, dtype=float)
    if values.ndim != 1:
        raise InvalidLayout("values must be a flat sequence", {"shape": values.shape})

    g = grid(
        len(values),
        row_count=row_count,
        row_start=row_start,
        padding=padding,
        canvas_size=canvas_size,
    )
    logger.debug(
        "Laying out %d pulses in %d columns x %d rows, cell side %.3f",
        g.count, g.column_count, g.row_count, g.cell_side,
    )
    if g.degenerate and g.count:
        logger.warning(
            "Canvas %s too small for %d columns x %d rows with padding %s; "
            "cell side is %.3f, nothing will be drawn",
            tuple(canvas_size), g.column_count, g.row_count, g.padding, g.cell_side,
        )

    slots = np.arange(g.count) + g.row_start
    columns, rows = np.divmod(slots, g.row_count)
    xs = columns * g.pitch + g.padding / 2
    ys = rows * g.pitch + g.padding / 2

    pulses = []
    for i, value in enumerate(values):
        alpha, size_scale = resolve(style, value)
        pulses.append(
            Pulse(
                index=i,
                value=float(value),
                row=int(rows[i]),
                column=int(columns[i]),
                offset=(float(xs[i]), float(ys[i])),
                side=g.cell_side,
                alpha=alpha,
                size_scale=size_scale,
            )
        )
    return Layout(grid=g, pulses=tuple(pulses))


def draw_layout(
    surface: Surface,
    result: Layout,
    shape: Shape | str = DEFAULTS["shape"],
    color: Color = DEFAULTS["color"],
) -> None:
    """Issue one draw call per pulse of an already computed layout."""
    shape = parse_shape(shape)
    if result.degenerate:
        return
    for pulse in result:
        shapes.draw(
            surface, shape, pulse.offset, pulse.side, color, pulse.alpha, pulse.size_scale
        )


def render(
    surface: Surface,
    values: ArrayLike | Sequence[float],
    shape: Shape | str = DEFAULTS["shape"],
    color: Color = DEFAULTS["color"],
    style: Style | str = Alpha(),
    *,
    row_count: int = DEFAULTS["row_count"],
    row_start: int = 0,
    padding: float = DEFAULTS["padding"],
    canvas_size: Point,
) -> Layout:
    """Lay out ``values`` and issue one draw call per pulse to ``surface``.

    Nothing is drawn when the layout is invalid (the error propagates) or
    degenerate.
    """
    shape = parse_shape(shape)
    result = layout(
        values,
        style,
        row_count=row_count,
        row_start=row_start,
        padding=padding,
        canvas_size=canvas_size,
    )
    draw_layout(surface, result, shape, color)
    return result
