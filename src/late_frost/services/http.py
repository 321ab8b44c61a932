"""
Shared HTTP client with automatic retry and backoff.

Provides a ``requests.Session`` whose adapter retries transient failures
(rate limiting, 5xx from the NASA POWER gateway, dropped connections) with
exponential backoff, and applies a default timeout to every request.

Usage::

    from late_frost.services.http import session

    resp = session.get(POWER_DAILY_POINT_API, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from late_frost import __version__

#: POWER answers 429 under load and 500/503 while regenerating its cache.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 2s, 4s between retries
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # callers use resp.raise_for_status()
)

DEFAULT_TIMEOUT = 60  # seconds; long daily ranges take a while to assemble

USER_AGENT = f"late-frost/{__version__}"


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter that fills in a timeout when the caller gives none."""

    def __init__(self, *args: Any, timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retrying adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to requests that do not pass one.
    """
    s = requests.Session()
    adapter = TimeoutHTTPAdapter(max_retries=retry or DEFAULT_RETRY, timeout=timeout)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
