"""Tests for the NASA POWER datasource."""

from __future__ import annotations

from datetime import date
from unittest.mock import Mock, patch

import numpy as np
import pandas as pd
import pytest
import requests

from late_frost.datasources.power import (
    DEFAULT_PARS,
    POWER_DAILY_POINT_API,
    bundle_from_frames,
    fetch_daily_point,
    fetch_timeseries,
)
from late_frost.exceptions import ShapeError
from late_frost.schemas import ClimaBundle

SESSION_GET = "late_frost.datasources.power.timeseries.session.get"


def power_response(tmax: dict[str, float], tmin: dict[str, float]) -> Mock:
    """Build a mock POWER JSON response."""
    response = Mock()
    response.json.return_value = {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [10.7, 60.7, 250.0]},
        "properties": {"parameter": {"T2M_MAX": tmax, "T2M_MIN": tmin}},
    }
    response.raise_for_status = Mock()
    return response


class TestFetchDailyPoint:
    """Test fetching one location from POWER."""

    @patch(SESSION_GET)
    def test_request_params(self, mock_get: Mock) -> None:
        mock_get.return_value = power_response({"20190101": 1.5}, {"20190101": -3.0})

        fetch_daily_point(10.7, 60.7, date(2019, 1, 1), date(2019, 1, 31))

        mock_get.assert_called_once()
        assert mock_get.call_args.args[0] == POWER_DAILY_POINT_API
        params = mock_get.call_args.kwargs["params"]
        assert params["parameters"] == "T2M_MAX,T2M_MIN"
        assert params["community"] == "AG"
        assert params["longitude"] == 10.7
        assert params["latitude"] == 60.7
        assert params["start"] == "20190101"
        assert params["end"] == "20190131"
        assert params["format"] == "JSON"

    @patch(SESSION_GET)
    def test_parses_values(self, mock_get: Mock) -> None:
        mock_get.return_value = power_response(
            {"20190101": 1.5, "20190102": 2.5},
            {"20190101": -3.0, "20190102": -4.0},
        )

        frame = fetch_daily_point(10.7, 60.7, date(2019, 1, 1), date(2019, 1, 2))

        assert list(frame.columns) == list(DEFAULT_PARS)
        assert frame.index.tolist() == [pd.Timestamp("2019-01-01"), pd.Timestamp("2019-01-02")]
        assert frame["T2M_MAX"].tolist() == [1.5, 2.5]
        assert frame["T2M_MIN"].tolist() == [-3.0, -4.0]

    @patch(SESSION_GET)
    def test_fill_value_becomes_nan(self, mock_get: Mock) -> None:
        mock_get.return_value = power_response(
            {"20190101": -999.0, "20190102": 2.5},
            {"20190101": -3.0, "20190102": -999.0},
        )

        frame = fetch_daily_point(10.7, 60.7, date(2019, 1, 1), date(2019, 1, 2))

        assert np.isnan(frame["T2M_MAX"].iloc[0])
        assert np.isnan(frame["T2M_MIN"].iloc[1])
        assert frame["T2M_MAX"].iloc[1] == 2.5

    @patch(SESSION_GET)
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("422 Client Error")
        mock_get.return_value = response

        with pytest.raises(requests.HTTPError):
            fetch_daily_point(10.7, 60.7, date(2019, 1, 1), date(2019, 1, 2))


class TestFetchTimeseries:
    """Test fetching several locations into a bundle."""

    @patch(SESSION_GET)
    def test_one_request_per_location(self, mock_get: Mock) -> None:
        mock_get.return_value = power_response(
            {"20190101": 5.0, "20190102": 6.0},
            {"20190101": -3.0, "20190102": -2.0},
        )
        window = (date(2019, 1, 1), date(2019, 1, 2))

        bundle = fetch_timeseries([(10.7, 60.7), (11.0, 61.1)], [window, window])

        assert mock_get.call_count == 2
        assert isinstance(bundle, ClimaBundle)
        assert bundle.tmax["id"].tolist() == [1, 1, 2, 2]
        assert bundle.tmax["value"].tolist() == [5.0, 6.0, 5.0, 6.0]
        assert bundle.tmin["value"].tolist() == [-3.0, -2.0, -3.0, -2.0]

    def test_window_count_mismatch(self) -> None:
        with pytest.raises(ShapeError, match="windows"):
            fetch_timeseries([(10.7, 60.7)], [])


class TestBundleFromFrames:
    """Test stacking per-location frames."""

    def test_ids_follow_frame_order(self) -> None:
        frames = [
            pd.DataFrame(
                {"T2M_MAX": [1.0], "T2M_MIN": [0.0]},
                index=pd.to_datetime(["2019-01-01"]),
            ),
            pd.DataFrame(
                {"T2M_MAX": [2.0, 3.0], "T2M_MIN": [0.0, 1.0]},
                index=pd.to_datetime(["2019-01-01", "2019-01-02"]),
            ),
        ]
        bundle = bundle_from_frames(frames)
        assert bundle.tmax["id"].tolist() == [1, 2, 2]
        assert bundle.tmin["date"].tolist()[-1] == pd.Timestamp("2019-01-02")

    def test_needs_two_pars(self) -> None:
        with pytest.raises(ShapeError, match="exactly two"):
            bundle_from_frames([], ("T2M_MAX", "T2M_MIN", "T2M"))

    def test_empty(self) -> None:
        bundle = bundle_from_frames([])
        assert bundle.tmax.empty
        assert list(bundle.tmax.columns) == ["id", "date", "value"]
