"""
HTTP session for the DOPA services.

The session retries transient failures (connection resets, 429 and 5xx
gateway errors) with exponential backoff and applies the configured timeout
to every request, so endpoint code only passes the URL and query.  Retry
count and timeout come from :class:`pydopa.config.Settings`
(``PYDOPA_HTTP_RETRIES``, ``PYDOPA_HTTP_TIMEOUT``).

Usage::

    from pydopa.services.http import get_session

    resp = get_session().get(url, params={"country_id": 246})
    resp.raise_for_status()
"""

from __future__ import annotations

from functools import lru_cache

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pydopa import __version__
from pydopa.config import get_settings

# DOPA sits behind a gateway that answers 502/503 while the backend restarts.
RETRY_STATUSES = (429, 502, 503, 504)


def build_retry(total: int) -> Retry:
    """Retry policy for idempotent requests: backoff of 0s, 2s, 4s, 8s..."""
    return Retry(
        total=total,
        backoff_factor=2,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=["GET", "HEAD", "OPTIONS"],
        raise_on_status=False,  # resp.raise_for_status() reports the final status
    )


class DopaSession(requests.Session):
    """``requests.Session`` that falls back to a fixed timeout."""

    def __init__(self, timeout: float, retry: Retry) -> None:
        super().__init__()
        self.timeout = timeout
        adapter = HTTPAdapter(max_retries=retry)
        self.mount("https://", adapter)
        self.mount("http://", adapter)
        self.headers["User-Agent"] = f"pydopa/{__version__}"
        self.headers["Accept"] = "application/json"

    def request(self, method: str, url: str, **kwargs: object) -> requests.Response:  # type: ignore[override]
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)  # type: ignore[arg-type]


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> DopaSession:
    """
    Build a session from settings.

    Args:
        retry: Retry policy; defaults to ``build_retry(settings.http_retries)``.
        timeout: Per-request timeout in seconds; defaults to ``settings.http_timeout``.
    """
    settings = get_settings()
    return DopaSession(
        timeout=settings.http_timeout if timeout is None else timeout,
        retry=retry or build_retry(settings.http_retries),
    )


@lru_cache
def get_session() -> DopaSession:
    """Shared session, built on first use."""
    return create_session()
