"""Pytest configuration.

Adds the repository root to ``sys.path`` so the root-level scripts import
without installing, and provides canned OpenWeatherMap payloads plus a fake
HTTP session so no test touches the network.
"""

import json
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from weather_mcp.config import WeatherConfig  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for ``requests``: records every ``get`` and replays one response."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


CURRENT_PAYLOAD = {
    "coord": {"lon": -97.74, "lat": 30.27},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "main": {
        "temp": 72.4,
        "feels_like": 73.6,
        "temp_min": 68.2,
        "temp_max": 78.9,
        "pressure": 1015,
        "humidity": 65,
    },
    "wind": {"speed": 8.3, "deg": 180, "gust": 14.76},
    "clouds": {"all": 75},
    "name": "Austin",
    "cod": 200,
}

FORECAST_PAYLOAD = {
    "cod": "200",
    "cnt": 2,
    "list": [
        {
            "dt": 1792411200,
            "main": {"temp": 70.6, "feels_like": 70.1, "humidity": 58},
            "weather": [{"main": "Rain", "description": "light rain"}],
            "wind": {"speed": 6.44},
            "pop": 0.25,
            "dt_txt": "2026-10-19 12:00:00",
        },
        {
            "dt": 1792422000,
            "main": {"temp": 68.2, "feels_like": 67.5, "humidity": 62},
            "weather": [],
            "wind": {"speed": 4.0},
            "pop": 0,
            "dt_txt": "2026-10-19 15:00:00",
        },
    ],
    "city": {"name": "Austin", "country": "US"},
}


def make_forecast(count, city="Austin"):
    start = datetime(2026, 10, 19, 0, 0, 0)
    entries = []
    for i in range(count):
        entries.append(
            {
                "main": {"temp": 50 + i, "feels_like": 49 + i, "humidity": 70},
                "weather": [{"main": "Clouds", "description": "overcast clouds"}],
                "wind": {"speed": 3.0},
                "pop": 0.5,
                "dt_txt": (start + timedelta(hours=3 * i)).strftime("%Y-%m-%d %H:%M:%S"),
            }
        )
    return {"cod": "200", "cnt": count, "list": entries, "city": {"name": city}}


@pytest.fixture
def config():
    return WeatherConfig(api_key="test-key", base_url="https://weather.test/data/2.5", timeout=5.0)


@pytest.fixture
def current_session():
    return FakeSession(FakeResponse(200, json.dumps(CURRENT_PAYLOAD)))


@pytest.fixture
def forecast_session():
    return FakeSession(FakeResponse(200, json.dumps(FORECAST_PAYLOAD)))


@pytest.fixture
def anyio_backend():
    return "asyncio"
