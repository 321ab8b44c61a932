"""Input shapes accepted by :func:`~late_frost.adapters.to_day_table`.

Location tables are plain ``pandas.DataFrame`` objects with two columns
(lon, lat); the pre-fetched bundle is :class:`~late_frost.schemas.ClimaBundle`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np  # noqa: TC002


@dataclass(frozen=True)
class TemperatureSeries:
    """Paired daily max/min temperatures for one series, optionally dated."""

    tmax: Any
    tmin: Any
    dates: Any = None


@dataclass(frozen=True)
class GriddedArray:
    """Daily values on a grid of points.

    ``values`` has shape ``(points, days, 2)``: the last axis holds
    (tmax, tmin). ``dates`` labels the ``days`` axis.
    """

    values: np.ndarray
    dates: Any


@dataclass(frozen=True)
class PointFeatures:
    """Point locations as shapely ``Point`` objects or GeoJSON mappings.

    A GeoJSON ``FeatureCollection`` mapping is accepted as well.
    """

    features: Any
