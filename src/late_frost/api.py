"""Top-level entry point: any supported input → late-frost report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from late_frost.adapters import to_day_table
from late_frost.events import late_frost_events
from late_frost.schemas import FrostOptions

if TYPE_CHECKING:
    import pandas as pd


def late_frost(
    obj: Any,
    *,
    base: float | None = None,
    tfrost: float | None = None,
    equation: str | None = None,
    **kwargs: Any,
) -> pd.DataFrame:
    """Compute late spring frost events.

    A late frost is a freezing day after enough warmth has accumulated to
    start crop development. Days are grouped into maximal runs of frost /
    non-frost, and each run is reported as ``frost``, ``latent`` (no frost,
    no GDD) or ``warming`` (GDD accumulating).

    Args:
        obj: A ``TemperatureSeries``, two-column (lon, lat) ``DataFrame``,
            ``GriddedArray`` / 3-D ``ndarray``, ``PointFeatures`` /
            ``MultiPoint``, or ``ClimaBundle``.
        base: GDD base temperature (default 4).
        tfrost: Freezing threshold (default -2).
        equation: GDD equation variant (default ``"variant_a"``).
        **kwargs: Shape-specific options: ``day_one``, ``span``,
            ``last_day``, ``pars``, ``fetcher`` (remote shapes) or
            ``dates`` (bare ndarray).

    Returns:
        DataFrame with ``id``, ``date``, ``gdd``, ``event`` and ``duration``.

    Example::

        from late_frost import TemperatureSeries, late_frost

        late_frost(TemperatureSeries(tmax=[5, 6, 12], tmin=[-3, -1, 4]))
    """
    overrides = {"base": base, "tfrost": tfrost, "equation": equation}
    options = FrostOptions(**{k: v for k, v in overrides.items() if v is not None})
    return late_frost_events(to_day_table(obj, **kwargs), options)
