"""Normalize every supported input shape into the canonical day table.

The canonical table has one row per day per series::

    id    int, 1-based, in the order series are presented
    date  datetime64[ns], NaT when no dates were given
    tmax  float
    tmin  float

Dispatch is on the input type (``functools.singledispatch``):

    TemperatureSeries          a single series, dates optional
    pandas.DataFrame           two-column (lon, lat) table, fetched remotely
    GriddedArray / ndarray     (points, days, 2) array sliced per point
    PointFeatures / MultiPoint point geometries, fetched remotely
    ClimaBundle                pre-fetched tmax/tmin long frames
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date
from functools import singledispatch
from typing import Any

import numpy as np
import pandas as pd
from shapely.geometry import MultiPoint, Point, shape

from late_frost.adapters.dates import coerce_dates
from late_frost.adapters.models import GriddedArray, PointFeatures, TemperatureSeries
from late_frost.adapters.windows import resolve_windows
from late_frost.datasources.power import DEFAULT_PARS, fetch_timeseries
from late_frost.exceptions import ShapeError
from late_frost.schemas import ClimaBundle

logger = logging.getLogger(__name__)

#: ``(coords, windows, pars) -> ClimaBundle``, e.g. :func:`fetch_timeseries`.
Fetcher = Callable[
    [Sequence[tuple[float, float]], Sequence[tuple[date, date]], Sequence[str]],
    ClimaBundle,
]


def canonical_table(ids: Any, dates: Any, tmax: Any, tmin: Any) -> pd.DataFrame:
    """Assemble a canonical day table from aligned columns.

    ``ids`` may hold any labels; they are renumbered 1..n in order of first
    appearance; a missing label raises ``ShapeError``. ``dates=None`` yields
    an all-``NaT`` date column.
    """
    tmax_arr = np.asarray(tmax, dtype=float)
    tmin_arr = np.asarray(tmin, dtype=float)
    labels = pd.Series(ids).reset_index(drop=True)
    n = len(labels)
    if not (tmax_arr.size == tmin_arr.size == n):
        msg = f"columns differ in length: id={n}, tmax={tmax_arr.size}, tmin={tmin_arr.size}"
        raise ShapeError(msg)

    days = pd.DatetimeIndex([pd.NaT] * n) if dates is None else coerce_dates(dates)
    if len(days) != n:
        msg = f"got {len(days)} dates for {n} days"
        raise ShapeError(msg)

    codes, _ = pd.factorize(labels, sort=False)
    if (codes < 0).any():
        msg = f"{int((codes < 0).sum())} days have no series id"
        raise ShapeError(msg)
    return pd.DataFrame(
        {
            "id": (codes + 1).astype("int64"),
            "date": days,
            "tmax": tmax_arr,
            "tmin": tmin_arr,
        }
    )


def day_table_from_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Read a canonical table from a frame with ``tmax``/``tmin`` columns.

    ``id`` and ``date`` columns are optional; without ``id`` the whole frame
    is one series.
    """
    missing = [c for c in ("tmax", "tmin") if c not in frame.columns]
    if missing:
        msg = f"frame is missing columns: {', '.join(missing)}"
        raise ShapeError(msg)
    ids = frame["id"] if "id" in frame.columns else np.ones(len(frame), dtype="int64")
    dates = frame["date"] if "date" in frame.columns else None
    return canonical_table(ids, dates, frame["tmax"], frame["tmin"])


@singledispatch
def to_day_table(obj: Any, **kwargs: Any) -> pd.DataFrame:
    """Normalize ``obj`` into the canonical day table.

    Raises:
        TypeError: If ``obj`` is not a supported input shape.
    """
    msg = f"unsupported input type for late_frost: {type(obj).__name__}"
    raise TypeError(msg)


@to_day_table.register
def _(obj: TemperatureSeries, **kwargs: Any) -> pd.DataFrame:
    n = len(obj.tmax)
    return canonical_table(np.ones(n, dtype="int64"), obj.dates, obj.tmax, obj.tmin)


@to_day_table.register
def _(obj: ClimaBundle, **kwargs: Any) -> pd.DataFrame:
    tmax = obj.tmax.reset_index(drop=True)
    tmin = obj.tmin.reset_index(drop=True)
    if not np.array_equal(tmax["id"].to_numpy(), tmin["id"].to_numpy()):
        msg = "ClimaBundle tmax and tmin series ids do not line up"
        raise ShapeError(msg)
    return canonical_table(tmax["id"], tmax["date"], tmax["value"], tmin["value"])


@to_day_table.register
def _(
    obj: GriddedArray,
    *,
    day_one: Any,
    span: Any = None,
    last_day: Any = None,
    **kwargs: Any,
) -> pd.DataFrame:
    values = np.asarray(obj.values, dtype=float)
    if values.ndim != 3 or values.shape[2] != 2:
        msg = f"gridded values must have shape (points, days, 2), got {values.shape}"
        raise ShapeError(msg)
    days = coerce_dates(obj.dates)
    if len(days) != values.shape[1]:
        msg = f"got {len(days)} dates for {values.shape[1]} days"
        raise ShapeError(msg)
    if days.has_duplicates:
        msg = "gridded dates must be unique, one per day column"
        raise ShapeError(msg)

    if span is None and last_day is None:
        # Every window runs as long as the one starting latest
        latest = coerce_dates(day_one).max()
        if latest not in days:
            msg = f"day_one {latest.date()} is outside the array's dates"
            raise ShapeError(msg)
        span = len(days) - 1 - days.get_loc(latest)

    windows = resolve_windows(day_one, values.shape[0], span=span, last_day=last_day)
    ids, dates, tmax, tmin = [], [], [], []
    for point, (start, end) in enumerate(windows):
        mask = np.asarray((days >= start) & (days <= end))
        if not mask.any():
            msg = f"point {point + 1}: no days between {start.date()} and {end.date()}"
            raise ShapeError(msg)
        ids.append(np.full(int(mask.sum()), point + 1))
        dates.append(days[mask])
        tmax.append(values[point, mask, 0])
        tmin.append(values[point, mask, 1])

    logger.debug("gridded input: %d points, %d days", values.shape[0], values.shape[1])
    return canonical_table(
        np.concatenate(ids),
        pd.DatetimeIndex(np.concatenate([d.to_numpy() for d in dates])),
        np.concatenate(tmax),
        np.concatenate(tmin),
    )


@to_day_table.register
def _(obj: np.ndarray, *, dates: Any, **kwargs: Any) -> pd.DataFrame:
    return to_day_table(GriddedArray(values=obj, dates=dates), **kwargs)


def _fetch_day_table(
    coords: list[tuple[float, float]],
    *,
    day_one: Any,
    span: Any = None,
    last_day: Any = None,
    pars: Sequence[str] | None = None,
    fetcher: Fetcher | None = None,
) -> pd.DataFrame:
    windows = resolve_windows(day_one, len(coords), span=span, last_day=last_day)
    fetch = fetcher or fetch_timeseries
    bundle = fetch(
        coords,
        [(start.date(), end.date()) for start, end in windows],
        tuple(pars or DEFAULT_PARS),
    )
    return to_day_table(bundle)


@to_day_table.register
def _(obj: pd.DataFrame, *, day_one: Any, **kwargs: Any) -> pd.DataFrame:
    if obj.shape[1] != 2:
        msg = (
            f"location table must have exactly two columns (lon, lat), got {obj.shape[1]}; "
            "pass daily temperatures as TemperatureSeries or ClimaBundle"
        )
        raise ShapeError(msg)
    coords = [(float(lon), float(lat)) for lon, lat in obj.itertuples(index=False)]
    return _fetch_day_table(coords, day_one=day_one, **kwargs)


def point_coords(features: Any) -> list[tuple[float, float]]:
    """Extract ``(lon, lat)`` from shapely points or GeoJSON point mappings.

    Raises:
        ShapeError: If any feature is not a point.
    """
    if isinstance(features, Mapping) and features.get("type") == "FeatureCollection":
        features = features["features"]

    coords = []
    for i, feature in enumerate(features, start=1):
        geom = feature
        if isinstance(feature, Mapping):
            geom = shape(feature["geometry"] if feature.get("type") == "Feature" else feature)
        if not isinstance(geom, Point):
            kind = getattr(geom, "geom_type", type(geom).__name__)
            msg = f"feature {i} is a {kind}, expected a Point"
            raise ShapeError(msg)
        coords.append((geom.x, geom.y))
    return coords


@to_day_table.register
def _(obj: PointFeatures, *, day_one: Any, **kwargs: Any) -> pd.DataFrame:
    return _fetch_day_table(point_coords(obj.features), day_one=day_one, **kwargs)


@to_day_table.register
def _(obj: MultiPoint, *, day_one: Any, **kwargs: Any) -> pd.DataFrame:
    return to_day_table(PointFeatures(list(obj.geoms)), day_one=day_one, **kwargs)
