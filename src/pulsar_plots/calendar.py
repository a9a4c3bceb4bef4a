"""Turn a calendar of daily counts into layout-engine input."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Mapping

import numpy as np
from numpy.typing import ArrayLike

from .theme import DEFAULTS

# Python weekday() of the day drawn in row 0
WEEK_STARTS = {"monday": 0, "sunday": 6}


@dataclass(frozen=True)
class CalendarSeries:
    values: np.ndarray
    row_start: int
    start: date | None
    end: date | None


def _day(key: date | datetime) -> date:
    return key.date() if isinstance(key, datetime) else key


def weekday_row(day: date, week_start: str = DEFAULTS["week_start"]) -> int:
    """Row (0-6) that ``day`` occupies in a week column."""
    try:
        first = WEEK_STARTS[week_start.lower()]
    except KeyError:
        raise ValueError(
            f"week_start must be one of {sorted(WEEK_STARTS)}, got {week_start!r}"
        ) from None
    return (day.weekday() - first) % 7


def normalize(counts: ArrayLike) -> np.ndarray:
    """Scale counts into [0, 1] by their maximum. All-zero input stays zero."""
    arr = np.asarray(counts, dtype=float)
    if arr.size and (arr < 0).any():
        raise ValueError("counts cannot be negative")
    peak = arr.max() if arr.size else 0.0
    if peak == 0:
        return np.zeros_like(arr)
    return arr / peak


def series(
    contributions: Mapping[date, int],
    week_start: str = DEFAULTS["week_start"],
) -> CalendarSeries:
    """Order, gap-fill and normalize a ``{day: count}`` mapping.

    Days between the earliest and latest key that are missing from the
    mapping count as zero. ``datetime`` keys are reduced to their date and
    summed per day.
    """
    daily: dict[date, float] = {}
    for key, count in contributions.items():
        day = _day(key)
        daily[day] = daily.get(day, 0) + count

    if not daily:
        return CalendarSeries(np.zeros(0), 0, None, None)

    start, end = min(daily), max(daily)
    days = (end - start).days + 1
    counts = [daily.get(start + timedelta(days=i), 0) for i in range(days)]

    return CalendarSeries(
        values=normalize(counts),
        row_start=weekday_row(start, week_start),
        start=start,
        end=end,
    )


def sample_contributions(
    days: int = 365,
    start: date = date(2020, 1, 1),
    high: int = 1000,
    seed: int | None = None,
) -> dict[date, int]:
    """Random daily counts in [0, high], for previews and examples."""
    rng = np.random.default_rng(seed)
    counts = rng.integers(0, high, size=days, endpoint=True)
    return {start + timedelta(days=i): int(c) for i, c in enumerate(counts)}
