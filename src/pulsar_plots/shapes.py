"""Shape renderers: turn one placed cell into one primitive draw call."""

from __future__ import annotations

from typing import Callable

from .model import Shape
from .surface import Color, Point, Surface

# Corner radius of a squircle as a fraction of its side
SQUIRCLE_ROUNDING = 1 / 8


def _rectify(offset: Point, side: float, size_scale: float) -> tuple[Point, float]:
    """Scale a cell's side and keep the result centered in the cell."""
    effective = max(side * size_scale, 0.0)
    delta = (side - effective) / 2
    return (offset[0] + delta, offset[1] + delta), effective


def square(
    surface: Surface,
    offset: Point,
    side: float,
    color: Color,
    alpha: float,
    size_scale: float = 1.0,
) -> None:
    top_left, effective = _rectify(offset, side, size_scale)
    surface.fill_rect(top_left, (effective, effective), color, alpha)


def squircle(
    surface: Surface,
    offset: Point,
    side: float,
    color: Color,
    alpha: float,
    size_scale: float = 1.0,
) -> None:
    top_left, effective = _rectify(offset, side, size_scale)
    radius = effective * SQUIRCLE_ROUNDING
    surface.fill_rounded_rect(top_left, (effective, effective), (radius, radius), color, alpha)


def circle(
    surface: Surface,
    offset: Point,
    side: float,
    color: Color,
    alpha: float,
    size_scale: float = 1.0,
) -> None:
    center = (offset[0] + side / 2, offset[1] + side / 2)
    surface.fill_circle(center, max(side / 2 * size_scale, 0.0), color, alpha)


Renderer = Callable[[Surface, Point, float, Color, float, float], None]

RENDERERS: dict[Shape, Renderer] = {
    Shape.CIRCLE: circle,
    Shape.SQUARE: square,
    Shape.SQUIRCLE: squircle,
}


def draw(
    surface: Surface,
    shape: Shape,
    offset: Point,
    side: float,
    color: Color,
    alpha: float,
    size_scale: float = 1.0,
) -> None:
    """Dispatch to the renderer for ``shape``."""
    RENDERERS[shape](surface, offset, side, color, alpha, size_scale)
