"""late-frost - late spring frost events from daily temperatures.

A late frost is a freezing event after enough warmth has accumulated to
trigger crop development. Daily series are segmented into runs of
frost / non-frost days and each run is reported as frost, latent or warming.

Architecture::

    adapters/      Input shapes → canonical day table (singledispatch)
    datasources/   External APIs (NASA POWER daily point data)
    gdd/           Daily growing degree-days, equation variants
    events/        The event engine (indicator → runs → classified report)
    flows/         Prefect orchestration (fetch per location, compute events)
    services/      Shared utilities (HTTP client with retry)

Data flow: inputs → adapters (→ datasources) → gdd → events → report
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from late_frost.adapters import GriddedArray, PointFeatures, TemperatureSeries  # noqa: E402
from late_frost.api import late_frost  # noqa: E402
from late_frost.config import Settings  # noqa: E402
from late_frost.schemas import ClimaBundle, EventKind, FrostEvent, FrostOptions  # noqa: E402

__all__ = [
    "ClimaBundle",
    "EventKind",
    "FrostEvent",
    "FrostOptions",
    "GriddedArray",
    "PointFeatures",
    "Settings",
    "TemperatureSeries",
    "__version__",
    "late_frost",
]
