"""NASA POWER daily point data source.

Fetches daily max/min 2 m temperature (or any two POWER variables) for a
set of locations and packs them into a :class:`~late_frost.schemas.ClimaBundle`.

Public API:
  - client: POWER_DAILY_POINT_API, DEFAULT_PARS, FILL_VALUE
  - timeseries: fetch_daily_point, fetch_timeseries, bundle_from_frames
"""

from late_frost.datasources.power.client import (
    DEFAULT_PARS,
    FILL_VALUE,
    POWER_DAILY_POINT_API,
)
from late_frost.datasources.power.timeseries import (
    bundle_from_frames,
    fetch_daily_point,
    fetch_timeseries,
)

__all__ = [
    "DEFAULT_PARS",
    "FILL_VALUE",
    "POWER_DAILY_POINT_API",
    "bundle_from_frames",
    "fetch_daily_point",
    "fetch_timeseries",
]
