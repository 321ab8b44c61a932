"""Shared fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd
import pytest

from late_frost.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the developer's environment and the settings cache."""
    for name in ("LATE_FROST_BASE", "LATE_FROST_TFROST", "LATE_FROST_EQUATION", "LATE_FROST_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def spring_table() -> pd.DataFrame:
    """Two series: a frost spell into warming, and a mild latent stretch."""
    return pd.DataFrame(
        {
            "id": [1, 1, 1, 1, 1, 2, 2, 2],
            "date": pd.to_datetime(
                [
                    "2019-04-01",
                    "2019-04-02",
                    "2019-04-03",
                    "2019-04-04",
                    "2019-04-05",
                    "2019-05-01",
                    "2019-05-02",
                    "2019-05-03",
                ]
            ),
            # series 1 -> gdd [0, 0, 0, 2, 3] with base 4, variant_a
            "tmax": [5.0, 5.0, 5.0, 11.0, 13.0, 3.0, 3.0, 3.0],
            "tmin": [-3.0, -3.0, 1.0, 1.0, 1.0, 5.0, 5.0, 5.0],
        }
    )
