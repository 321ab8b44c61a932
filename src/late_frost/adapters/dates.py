"""Date coercion for heterogeneous date inputs.

Accepts ``date``/``datetime`` objects, ISO strings, ``numpy.datetime64``,
``pandas.Timestamp`` and integers (days since 1970-01-01). Everything is
normalized to midnight ``datetime64[ns]``.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from late_frost.exceptions import DateCoercionError


def as_sequence(value: Any) -> list[Any]:
    """Flatten a scalar, sequence, array or first frame column into a list."""
    if isinstance(value, pd.DataFrame):
        return value.iloc[:, 0].tolist()
    if isinstance(value, (pd.Series, pd.Index)):
        return value.tolist()
    if isinstance(value, np.ndarray):
        return value.ravel().tolist() if value.dtype.kind not in "mM" else list(value.ravel())
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _is_day_number(value: Any) -> bool:
    # Integer columns holding missing values arrive as whole floats
    if isinstance(value, (float, np.floating)):
        return float(value).is_integer()
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_missing(value: Any) -> bool:
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return value is None or value is pd.NA or value is pd.NaT


def coerce_dates(values: Any) -> pd.DatetimeIndex:
    """Coerce one or many date-like values to a ``DatetimeIndex``.

    ``None`` and other missing entries become ``NaT``.

    Raises:
        DateCoercionError: If any value cannot be read as a date.
    """
    items = as_sequence(values)
    try:
        present = [v for v in items if not _is_missing(v)]
        if present and all(_is_day_number(v) for v in present):
            days = [np.nan if _is_missing(v) else float(v) for v in items]
            parsed = pd.to_datetime(pd.Series(days, dtype="float64"), unit="D")
        else:
            parsed = pd.to_datetime(pd.Series(items, dtype=object))
    except (ValueError, TypeError, OverflowError) as err:
        preview = ", ".join(repr(v) for v in items[:3])
        msg = f"cannot coerce to dates: {preview}{', ...' if len(items) > 3 else ''}"
        raise DateCoercionError(msg) from err
    return pd.DatetimeIndex(parsed).normalize()


def coerce_date(value: Any) -> pd.Timestamp:
    """Coerce a single value to a ``Timestamp``; missing values are an error."""
    result = coerce_dates([value])
    if pd.isna(result[0]):
        msg = f"cannot coerce to a date: {value!r}"
        raise DateCoercionError(msg)
    return result[0]
