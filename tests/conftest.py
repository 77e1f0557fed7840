# ABOUTME: Shared test fixtures for the Skyline weather widget test suite.
# ABOUTME: Provides canned Open-Meteo payloads and mock httpx client / app context builders.

from datetime import date, timedelta
from unittest.mock import AsyncMock

import httpx
import pytest

from skyline.deps import AppContext
from skyline.theme import MemoryStore, ThemeManager
from skyline.view import WeatherView

LONDON_GEOCODE = {
    "results": [
        {
            "name": "London",
            "country_code": "GB",
            "country": "United Kingdom",
            "latitude": 51.5,
            "longitude": -0.12,
            "timezone": "Europe/London",
        }
    ]
}


def forecast_payload(days: int = 7, start: date | None = None) -> dict:
    """Open-Meteo forecast response with `days` aligned daily entries starting today."""
    start = start or date.today()
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "current": {
            "temperature_2m": 14.6,
            "relative_humidity_2m": 72,
            "weather_code": 3,
            "wind_speed_10m": 11.8,
            "apparent_temperature": 13.2,
        },
        "daily": {
            "time": [(start + timedelta(days=i)).isoformat() for i in range(days)],
            "weather_code": [61] + [0] * (days - 1),
            "temperature_2m_max": [16.2] + [18.0] * (days - 1),
            "temperature_2m_min": [9.8] + [8.0] * (days - 1),
        },
    }


def json_response(json_data: dict, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


def mock_client(*responses) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient whose get() returns (or raises) the given items in order."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.side_effect = list(responses)
    return mock


def make_context(client: httpx.AsyncClient, view: WeatherView | None = None) -> AppContext:
    return AppContext(
        http_client=client,
        view=view or WeatherView(),
        theme=ThemeManager(MemoryStore(), platform_hint="dark"),
    )


@pytest.fixture
def london_client() -> httpx.AsyncClient:
    return mock_client(json_response(LONDON_GEOCODE), json_response(forecast_payload()))
