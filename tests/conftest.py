"""Shared fixtures."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from weather_now.config import Settings

PARIS_BODY: dict[str, Any] = {
    "location": {"name": "Paris"},
    "current": {
        "temp_c": 20.0,
        "temp_f": 68.0,
        "condition": {"text": "Sunny", "code": 1000},
    },
}


def make_response(status: int, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    """Build a real ``requests.Response`` with the given status and JSON body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://api.weatherapi.com/v1/current.json"
    resp._content = raw if raw is not None else json.dumps(body).encode()
    return resp


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, api_key="test-key")  # type: ignore[call-arg]


@pytest.fixture
def paris_json() -> str:
    return json.dumps(PARIS_BODY)
