"""Shapes and styles: how a normalized value becomes an opacity and a size.

Styles are plain frozen dataclasses. ``resolve()`` is the single place that
branches on them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .errors import InvalidStyle

logger = logging.getLogger(__name__)


class Shape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    SQUIRCLE = "squircle"


@dataclass(frozen=True)
class Alpha:
    """Opacity interpolated between ``min`` and ``max``; full cell size."""

    min: float = 0.0
    max: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.min <= self.max <= 1.0:
            raise InvalidStyle(
                "Alpha bounds must satisfy 0 <= min <= max <= 1",
                {"min": self.min, "max": self.max},
            )


@dataclass(frozen=True)
class Size:
    """Fully opaque; side scaled by ``value * overshoot``."""

    overshoot: float = 1.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.overshoot) and self.overshoot > 0):
            raise InvalidStyle(
                "Size overshoot must be finite and positive",
                {"overshoot": self.overshoot},
            )


@dataclass(frozen=True)
class AlphaSize:
    """Opacity from ``alpha``, scale from ``size``."""

    alpha: Alpha = field(default_factory=Alpha)
    size: Size = field(default_factory=Size)


Style = Union[Alpha, Size, AlphaSize]


def _clamp(value: float) -> float:
    value = float(value)
    # NaN counts as no activity
    clamped = 0.0 if math.isnan(value) else min(max(value, 0.0), 1.0)
    if clamped != value:
        logger.debug("Clamped pulse value %r to %r", value, clamped)
    return clamped


def _alpha(style: Alpha, value: float) -> float:
    return value * (style.max - style.min) + style.min


def resolve(style: Style, value: float) -> tuple[float, float]:
    """Return ``(alpha, size_scale)`` for one value under ``style``.

    Values outside [0, 1] are clamped first, so the result never carries a
    negative scale or an opacity outside the style's bounds.
    """
    value = _clamp(value)
    if isinstance(style, Alpha):
        return _alpha(style, value), 1.0
    if isinstance(style, Size):
        return 1.0, value * style.overshoot
    if isinstance(style, AlphaSize):
        return _alpha(style.alpha, value), value * style.size.overshoot
    raise InvalidStyle("Unknown style", {"style": repr(style)})


def parse_shape(name: str | Shape) -> Shape:
    """Look up a shape by name, case-insensitively."""
    if isinstance(name, Shape):
        return name
    try:
        return Shape(name.strip().lower())
    except ValueError:
        raise InvalidStyle(
            f"Unknown shape: {name!r}",
            {"choices": [s.value for s in Shape]},
        ) from None


def parse_style(spec: str | Style) -> Style:
    """Build a style from a short text form.

    Accepted forms::

        alpha                  Alpha()
        alpha:0.2:0.8          Alpha(min=0.2, max=0.8)
        size                   Size()
        size:1.8               Size(overshoot=1.8)
        alpha-size             AlphaSize()
        alpha-size:0:0.6:1.8   AlphaSize(Alpha(0, 0.6), Size(1.8))
    """
    if isinstance(spec, (Alpha, Size, AlphaSize)):
        return spec

    kind, *params = spec.strip().lower().split(":")
    try:
        numbers = [float(p) for p in params]
    except ValueError:
        raise InvalidStyle(f"Non-numeric style parameter in {spec!r}") from None

    if kind == "alpha" and len(numbers) in (0, 2):
        return Alpha(*numbers)
    if kind == "size" and len(numbers) in (0, 1):
        return Size(*numbers)
    if kind in ("alpha-size", "alphasize") and len(numbers) in (0, 3):
        if not numbers:
            return AlphaSize()
        return AlphaSize(Alpha(numbers[0], numbers[1]), Size(numbers[2]))
    raise InvalidStyle(
        f"Unknown style: {spec!r}",
        {"choices": ["alpha[:min:max]", "size[:overshoot]", "alpha-size[:min:max:overshoot]"]},
    )
