"""
Prefect flow: fetch daily temperatures per location, then compute events.

Run locally:
    python -m late_frost.flows.frost

Run with Prefect dashboard:
    prefect server start &
    python -m late_frost.flows.frost
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from prefect import flow, task

from late_frost.adapters import resolve_windows, to_day_table
from late_frost.datasources import power
from late_frost.events import late_frost_events
from late_frost.schemas import FrostOptions

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    import pandas as pd

logger = logging.getLogger(__name__)


@task(name="fetch-power-point", retries=2, retry_delay_seconds=5)
def fetch_point(
    lon: float,
    lat: float,
    start: date,
    end: date,
    pars: Sequence[str] = power.DEFAULT_PARS,
) -> pd.DataFrame:
    """Fetch one location's daily series from NASA POWER."""
    return power.fetch_daily_point(lon, lat, start, end, pars)


@task(name="compute-late-frost-events")
def compute_events(table: pd.DataFrame, options: FrostOptions) -> pd.DataFrame:
    """Run the event engine over the canonical day table."""
    return late_frost_events(table, options)


@flow(name="late-frost", validate_parameters=False)
def late_frost_flow(
    locations: Sequence[tuple[float, float]],
    day_one: Any,
    span: Any = None,
    last_day: Any = None,
    pars: Sequence[str] = power.DEFAULT_PARS,
    base: float | None = None,
    tfrost: float | None = None,
    equation: str | None = None,
) -> pd.DataFrame:
    """
    Late-frost report for a list of ``(lon, lat)`` locations.

    Each location is fetched as its own task (with retries), the results
    are bundled in location order and handed to the event engine.
    """
    overrides = {"base": base, "tfrost": tfrost, "equation": equation}
    options = FrostOptions(**{k: v for k, v in overrides.items() if v is not None})

    windows = resolve_windows(day_one, len(locations), span=span, last_day=last_day)
    frames = []
    for (lon, lat), (start, end) in zip(locations, windows):
        logger.info("Fetching (%s, %s) %s..%s", lon, lat, start.date(), end.date())
        frames.append(fetch_point(lon, lat, start.date(), end.date(), tuple(pars)))

    table = to_day_table(power.bundle_from_frames(frames, tuple(pars)))
    return compute_events(table, options)


if __name__ == "__main__":
    report = late_frost_flow(
        locations=[(10.77, 60.75), (11.02, 61.11)],
        day_one="2019-01-01",
        last_day="2019-07-01",
    )
    print(report.to_string())
