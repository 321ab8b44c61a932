"""Per-series date windows from ``day_one`` plus ``span`` or ``last_day``."""

from __future__ import annotations

from typing import Any

import pandas as pd

from late_frost.adapters.dates import as_sequence, coerce_dates
from late_frost.exceptions import DateCoercionError, ShapeError


def broadcast(values: list[Any], n: int, name: str) -> list[Any]:
    """Repeat a single value ``n`` times, or check there is one per series."""
    if len(values) == 1:
        return values * n
    if len(values) != n:
        msg = f"{name} must have 1 or {n} values, got {len(values)}"
        raise ShapeError(msg)
    return values


def resolve_windows(
    day_one: Any,
    n: int,
    *,
    span: Any = None,
    last_day: Any = None,
) -> list[tuple[pd.Timestamp, pd.Timestamp]]:
    """Build an inclusive ``(start, end)`` window for each of ``n`` series.

    ``last_day`` takes precedence over ``span``; a window spans
    ``day_one .. day_one + span`` days.

    Args:
        day_one: First day, one for all series or one per series.
        n: Number of series.
        span: Days after ``day_one``, scalar or one per series.
        last_day: Last day, scalar or one per series.

    Raises:
        ValueError: If neither ``span`` nor ``last_day`` is given, or a window
            ends before it starts.
        ShapeError: If a per-series argument has the wrong length.
    """
    starts = broadcast(list(coerce_dates(day_one)), n, "day_one")
    if any(pd.isna(s) for s in starts):
        msg = "day_one contains missing dates"
        raise DateCoercionError(msg)

    if last_day is not None:
        ends = broadcast(list(coerce_dates(last_day)), n, "last_day")
    elif span is not None:
        spans = broadcast([int(s) for s in as_sequence(span)], n, "span")
        ends = [start + pd.Timedelta(days=days) for start, days in zip(starts, spans)]
    else:
        msg = "either span or last_day is required to bound the time series"
        raise ValueError(msg)

    windows = list(zip(starts, ends))
    for i, (start, end) in enumerate(windows, start=1):
        if pd.isna(end) or end < start:
            msg = f"series {i}: window ends ({end}) before it starts ({start.date()})"
            raise ValueError(msg)
    return windows
