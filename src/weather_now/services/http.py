"""
Shared HTTP client for the weather API.

A single ``requests.Session`` with a ``urllib3`` retry strategy mounted on
both schemes. Weather lookups are single-shot, so the default strategy never
retries: a failed request is reported to the caller as-is. Callers pass
``timeout=`` themselves (see ``Settings.http_timeout``).

Usage::

    from weather_now.services.http import session

    resp = session.get(url, timeout=settings.http_timeout)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_now import __version__

#: Default strategy: no retries, the caller judges the status code.
NO_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    redirect=5,
    raise_on_status=False,
    raise_on_redirect=False,
)

USER_AGENT = f"weather-now/{__version__}"


def create_session(retry: Retry | None = None) -> requests.Session:
    """Build a session with ``retry`` (default ``NO_RETRY``) on http and https."""
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()
