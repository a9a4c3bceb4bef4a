"""Drawing surfaces: the three primitive fills the shape renderers issue.

``AxesSurface`` draws onto a matplotlib Axes; ``RecordingSurface`` keeps the
calls as plain records for headless use and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union

import matplotlib.pyplot as plt
from matplotlib.patches import BoxStyle, Circle, FancyBboxPatch, Rectangle

Point = tuple[float, float]
Color = Any  # anything matplotlib accepts; passed through untouched


class Surface(Protocol):
    def fill_rect(self, top_left: Point, size: Point, color: Color, alpha: float) -> None: ...

    def fill_rounded_rect(
        self,
        top_left: Point,
        size: Point,
        corner_radius: Point,
        color: Color,
        alpha: float,
    ) -> None: ...

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: float) -> None: ...


@dataclass(frozen=True)
class FillRect:
    top_left: Point
    size: Point
    color: Color
    alpha: float


@dataclass(frozen=True)
class FillRoundedRect:
    top_left: Point
    size: Point
    corner_radius: Point
    color: Color
    alpha: float


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    color: Color
    alpha: float


DrawCommand = Union[FillRect, FillRoundedRect, FillCircle]


@dataclass
class RecordingSurface:
    """Collects draw calls in the order they were issued."""

    commands: list[DrawCommand] = field(default_factory=list)

    def fill_rect(self, top_left: Point, size: Point, color: Color, alpha: float) -> None:
        self.commands.append(FillRect(top_left, size, color, alpha))

    def fill_rounded_rect(
        self,
        top_left: Point,
        size: Point,
        corner_radius: Point,
        color: Color,
        alpha: float,
    ) -> None:
        self.commands.append(FillRoundedRect(top_left, size, corner_radius, color, alpha))

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: float) -> None:
        self.commands.append(FillCircle(center, radius, color, alpha))

    def clear(self) -> None:
        self.commands.clear()


class AxesSurface:
    """Adds one filled patch per draw call to a matplotlib Axes.

    Coordinates are canvas units with the origin at the top-left; call
    ``prepare_axes()`` first so the y axis points down.
    """

    def __init__(self, ax: plt.Axes):
        self.ax = ax

    def fill_rect(self, top_left: Point, size: Point, color: Color, alpha: float) -> None:
        self.ax.add_patch(
            Rectangle(top_left, size[0], size[1], facecolor=color, alpha=alpha, linewidth=0)
        )

    def fill_rounded_rect(
        self,
        top_left: Point,
        size: Point,
        corner_radius: Point,
        color: Color,
        alpha: float,
    ) -> None:
        # matplotlib rounds with a single radius; rx == ry for every pulse
        radius = min(corner_radius)
        self.ax.add_patch(
            FancyBboxPatch(
                top_left,
                size[0],
                size[1],
                boxstyle=BoxStyle.Round(pad=0, rounding_size=radius),
                facecolor=color,
                alpha=alpha,
                linewidth=0,
            )
        )

    def fill_circle(self, center: Point, radius: float, color: Color, alpha: float) -> None:
        self.ax.add_patch(Circle(center, radius, facecolor=color, alpha=alpha, linewidth=0))


def prepare_axes(ax: plt.Axes, canvas_size: Point) -> None:
    """Map ``ax`` onto a W x H canvas with a top-left origin and no chrome."""
    width, height = canvas_size
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()
