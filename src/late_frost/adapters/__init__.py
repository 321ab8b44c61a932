"""Input adapters: every input shape → one canonical day table.

Public API:
  - models: TemperatureSeries, GriddedArray, PointFeatures
  - normalize: to_day_table (singledispatch), canonical_table,
               day_table_from_frame, point_coords
  - dates: coerce_dates, coerce_date
  - windows: resolve_windows

Adding an input shape
---------------------
1. Add a dataclass to ``models.py`` (or reuse an existing library type).
2. Register a converter::

       @to_day_table.register
       def _(obj: MyShape, **kwargs: Any) -> pd.DataFrame:
           return canonical_table(ids, dates, tmax, tmin)

3. Add tests in ``tests/test_adapters.py``.
"""

from late_frost.adapters.dates import coerce_date, coerce_dates
from late_frost.adapters.models import GriddedArray, PointFeatures, TemperatureSeries
from late_frost.adapters.normalize import (
    canonical_table,
    day_table_from_frame,
    point_coords,
    to_day_table,
)
from late_frost.adapters.windows import resolve_windows

__all__ = [
    "GriddedArray",
    "PointFeatures",
    "TemperatureSeries",
    "canonical_table",
    "coerce_date",
    "coerce_dates",
    "day_table_from_frame",
    "point_coords",
    "resolve_windows",
    "to_day_table",
]
