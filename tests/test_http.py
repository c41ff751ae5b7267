"""Tests for the shared HTTP session."""

from __future__ import annotations

import requests
from urllib3.util.retry import Retry

from weather_now.services.http import NO_RETRY, USER_AGENT, create_session, session


class TestNoRetry:
    """Verify lookups are never retried."""

    def test_total_retries(self) -> None:
        assert NO_RETRY.total == 0

    def test_no_connect_or_read_retries(self) -> None:
        assert NO_RETRY.connect == 0
        assert NO_RETRY.read == 0

    def test_status_left_to_caller(self) -> None:
        assert NO_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        assert isinstance(create_session(), requests.Session)

    def test_mounts_both_schemes(self) -> None:
        s = create_session()
        for url in ("https://example.com", "http://example.com"):
            adapter = s.get_adapter(url)
            assert isinstance(adapter, requests.adapters.HTTPAdapter)
            assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=3, backoff_factor=1))
        assert s.get_adapter("https://example.com").max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("weather-now/")


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        assert session.get_adapter("https://example.com").max_retries.total == 0
