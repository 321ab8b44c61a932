"""Late-frost event segmentation.

Per series:

    gdd[i]    = daily_gdd(tmax[i], tmin[i], base, equation)
    frost[i]  = tmin[i] <= tfrost and gdd[i] == 0
    runs      = maximal stretches of equal frost[i]
    event     = frost      if the run is a frost run
                latent     elif sum(gdd over run) == 0
                warming    otherwise

Missing ``tmin`` or ``gdd`` never flag frost and count as 0 in the sums.
Series are independent; the table is split by ``id``, processed, and
concatenated back with a report-wide 1..N index.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from late_frost.exceptions import ShapeError
from late_frost.gdd.compute import daily_gdd
from late_frost.schemas import EventKind, FrostOptions

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)

DAY_COLUMNS = ("id", "date", "tmax", "tmin")
REPORT_COLUMNS = ("id", "date", "gdd", "event", "duration")

#: Fixed, ordered levels; empty levels stay valid categories.
EVENT_DTYPE = pd.CategoricalDtype(categories=[k.value for k in EventKind], ordered=True)


def frost_indicator(tmin: ArrayLike, gdd: ArrayLike, tfrost: float) -> NDArray[np.bool_]:
    """Flag days at or below ``tfrost`` that accumulated no heat.

    ``NaN`` compares false, so a missing ``tmin`` or ``gdd`` is never frost.
    """
    tmin_arr = np.asarray(tmin, dtype=float)
    gdd_arr = np.asarray(gdd, dtype=float)
    return (tmin_arr <= tfrost) & (gdd_arr == 0)


def _run_boundaries(flags: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """True on the first day of every run."""
    return np.concatenate(([True], flags[1:] != flags[:-1]))


def run_ids(frost: ArrayLike) -> NDArray[np.int64]:
    """Label maximal runs of equal values with ids 1, 2, 3, ...

    Adjacent days share an id exactly when their values are equal.
    """
    flags = np.asarray(frost, dtype=bool)
    if flags.size == 0:
        return np.empty(0, dtype=np.int64)
    return np.cumsum(_run_boundaries(flags), dtype=np.int64)


def classify_run(is_frost: bool, gdd_sum: float) -> EventKind:
    """Classify one run: frost first, then latent vs warming by summed heat."""
    if is_frost:
        return EventKind.FROST
    if gdd_sum == 0:
        return EventKind.LATENT
    return EventKind.WARMING


def summarize_runs(dates: ArrayLike, gdd: ArrayLike, frost: ArrayLike) -> pd.DataFrame:
    """Collapse one series' days into one row per run.

    Args:
        dates: First-day candidates, one per day (may be all ``NaT``).
        gdd: Daily heat units, ``NaN`` allowed.
        frost: Daily frost indicator.

    Returns:
        DataFrame with ``date``, ``gdd``, ``event`` and ``duration`` columns,
        one row per run in day order.
    """
    flags = np.asarray(frost, dtype=bool)
    heat = np.nan_to_num(np.asarray(gdd, dtype=float), nan=0.0)
    days = pd.DatetimeIndex(pd.to_datetime(pd.Series(dates)))
    n = flags.size
    if not (len(days) == heat.size == n):
        msg = f"dates, gdd and frost differ in length: {len(days)}, {heat.size}, {n}"
        raise ShapeError(msg)
    if n == 0:
        return pd.DataFrame(columns=list(REPORT_COLUMNS[1:]))

    starts = np.flatnonzero(_run_boundaries(flags))
    sums = np.add.reduceat(heat, starts)
    return pd.DataFrame(
        {
            "date": days[starts],
            "gdd": sums,
            "event": [classify_run(bool(f), float(s)).value for f, s in zip(flags[starts], sums)],
            "duration": np.diff(np.append(starts, n)),
        }
    )


def series_events(days: pd.DataFrame, options: FrostOptions) -> pd.DataFrame:
    """Compute the late-frost events of a single series.

    Args:
        days: Canonical day rows of one series, in day order.
        options: GDD and frost parameters.

    Returns:
        Event rows with the series ``id`` prepended.
    """
    gdd = daily_gdd(days["tmax"], days["tmin"], base=options.base, equation=options.equation)
    frost = frost_indicator(days["tmin"], gdd, options.tfrost)
    events = summarize_runs(days["date"], gdd, frost)
    events.insert(0, "id", days["id"].iloc[0])
    logger.debug("series %s: %d days -> %d events", days["id"].iloc[0], len(days), len(events))
    return events


def empty_report() -> pd.DataFrame:
    """A report with no rows but the full column set and dtypes."""
    return pd.DataFrame(
        {
            "id": pd.Series(dtype="int64"),
            "date": pd.Series(dtype="datetime64[ns]"),
            "gdd": pd.Series(dtype="float64"),
            "event": pd.Series(dtype=EVENT_DTYPE),
            "duration": pd.Series(dtype="int64"),
        },
        index=pd.RangeIndex(1, 1),
    )


def late_frost_events(table: pd.DataFrame, options: FrostOptions | None = None) -> pd.DataFrame:
    """Compute late-frost events for every series in a canonical day table.

    Args:
        table: Rows ``{id, date, tmax, tmin}``, one per day per series, days
            within a series in chronological order.
        options: GDD and frost parameters (defaults from settings).

    Returns:
        Report with columns ``id``, ``date``, ``gdd``, ``event`` (ordered
        categorical ``frost < latent < warming``) and ``duration``, indexed
        1..N across all series.

    Raises:
        ShapeError: If a canonical column is missing or a day has no ``id``.
    """
    options = options or FrostOptions()
    missing = [c for c in DAY_COLUMNS if c not in table.columns]
    if missing:
        msg = f"day table is missing columns: {', '.join(missing)}"
        raise ShapeError(msg)
    if table["id"].isna().any():
        msg = f"day table has {int(table['id'].isna().sum())} days without a series id"
        raise ShapeError(msg)

    parts = [series_events(days, options) for _, days in table.groupby("id", sort=False)]
    if not parts:
        return empty_report()

    report = pd.concat(parts, ignore_index=True)
    report["id"] = report["id"].astype("int64")
    report["date"] = pd.to_datetime(report["date"])
    report["gdd"] = report["gdd"].astype("float64")
    report["event"] = report["event"].astype(EVENT_DTYPE)
    report["duration"] = report["duration"].astype("int64")
    report.index = pd.RangeIndex(1, len(report) + 1)
    logger.info("%d series -> %d late-frost events", len(parts), len(report))
    return report[list(REPORT_COLUMNS)]
