"""Daily point time series from the NASA POWER API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from late_frost.datasources.power.client import (
    COMMUNITY,
    DATE_FORMAT,
    DEFAULT_PARS,
    FILL_VALUE,
    POWER_DAILY_POINT_API,
)
from late_frost.exceptions import ShapeError
from late_frost.schemas import ClimaBundle
from late_frost.services.http import session

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

logger = logging.getLogger(__name__)


def fetch_daily_point(
    lon: float,
    lat: float,
    start: date,
    end: date,
    pars: Sequence[str] = DEFAULT_PARS,
) -> pd.DataFrame:
    """
    Fetch daily values for one location from NASA POWER.

    Args:
        lon: Longitude.
        lat: Latitude.
        start: First day (inclusive).
        end: Last day (inclusive).
        pars: POWER parameter names, e.g. ``("T2M_MAX", "T2M_MIN")``.

    Returns:
        DataFrame indexed by date with one float column per parameter;
        POWER fill values are replaced by ``NaN``.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params: dict[str, Any] = {
        "parameters": ",".join(pars),
        "community": COMMUNITY,
        "longitude": lon,
        "latitude": lat,
        "start": start.strftime(DATE_FORMAT),
        "end": end.strftime(DATE_FORMAT),
        "format": "JSON",
    }
    logger.debug("POWER request %s", params)
    resp = session.get(POWER_DAILY_POINT_API, params=params)
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()

    values = data.get("properties", {}).get("parameter", {})
    frame = pd.DataFrame({par: pd.Series(values.get(par, {}), dtype=float) for par in pars})
    frame.index = pd.to_datetime(frame.index, format=DATE_FORMAT)
    frame.index.name = "date"
    return frame.replace(FILL_VALUE, np.nan).sort_index()


def bundle_from_frames(
    frames: Sequence[pd.DataFrame],
    pars: Sequence[str] = DEFAULT_PARS,
) -> ClimaBundle:
    """Stack per-location frames into a :class:`ClimaBundle`.

    The n-th frame becomes series ``id`` n (1-based); ``pars[0]`` is read as
    tmax and ``pars[1]`` as tmin.
    """
    if len(pars) != 2:
        msg = f"pars must name exactly two variables (tmax, tmin), got {len(pars)}"
        raise ShapeError(msg)

    tmax_par, tmin_par = pars
    long = [
        pd.DataFrame(
            {
                "id": series_id,
                "date": frame.index,
                "tmax": frame[tmax_par].to_numpy(),
                "tmin": frame[tmin_par].to_numpy(),
            }
        )
        for series_id, frame in enumerate(frames, start=1)
    ]
    stacked = (
        pd.concat(long, ignore_index=True)
        if long
        else pd.DataFrame(columns=["id", "date", "tmax", "tmin"])
    )
    return ClimaBundle(
        tmax=stacked[["id", "date", "tmax"]].rename(columns={"tmax": "value"}),
        tmin=stacked[["id", "date", "tmin"]].rename(columns={"tmin": "value"}),
    )


def fetch_timeseries(
    coords: Sequence[tuple[float, float]],
    windows: Sequence[tuple[date, date]],
    pars: Sequence[str] = DEFAULT_PARS,
) -> ClimaBundle:
    """
    Fetch tmax/tmin for several locations, one request per location.

    Args:
        coords: ``(lon, lat)`` pairs.
        windows: ``(start, end)`` pair per location, inclusive.
        pars: Remote variable names for (tmax, tmin).

    Returns:
        ClimaBundle with series ids 1..len(coords) in ``coords`` order.
    """
    if len(coords) != len(windows):
        msg = f"got {len(coords)} locations but {len(windows)} date windows"
        raise ShapeError(msg)

    frames = [
        fetch_daily_point(lon, lat, start, end, pars)
        for (lon, lat), (start, end) in zip(coords, windows)
    ]
    logger.info("Fetched %d POWER series (%s)", len(frames), ", ".join(pars))
    return bundle_from_frames(frames, pars)
