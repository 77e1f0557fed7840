# ABOUTME: Service layer for Open-Meteo API calls and response parsing.
# ABOUTME: Resolves a city name to a Location and fetches current + 7-day daily weather.

from datetime import date

import httpx

from skyline import config
from skyline.models import CurrentConditions, DailyForecast, Location, WeatherSnapshot

FORECAST_DAYS = 7

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m,apparent_temperature"

DAILY_PARAMS = "weather_code,temperature_2m_max,temperature_2m_min"

_DAILY_COLUMNS = DAILY_PARAMS.split(",")


async def geocode(client: httpx.AsyncClient, query: str) -> Location | None:
    """Geocode a city name to its best-ranked match using Open-Meteo geocoding API.

    Returns None when the service has no match. Transport failures and non-2xx
    statuses raise httpx.HTTPError.
    """
    resp = await client.get(
        config.GEOCODING_URL,
        params={"name": query.strip(), "count": 1, "language": "en", "format": "json"},
    )
    resp.raise_for_status()
    data = resp.json()

    results = data.get("results")
    if not results:
        return None

    r = results[0]
    return Location(
        name=r["name"],
        country_code=r.get("country_code"),
        latitude=r["latitude"],
        longitude=r["longitude"],
        timezone=r.get("timezone") or "UTC",
    )


async def get_forecast(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    timezone: str,
    forecast_days: int = FORECAST_DAYS,
) -> WeatherSnapshot:
    """Fetch current conditions and the daily forecast from Open-Meteo forecast API."""
    resp = await client.get(
        config.FORECAST_URL,
        params={
            "latitude": latitude,
            "longitude": longitude,
            "timezone": timezone,
            "current": CURRENT_PARAMS,
            "daily": DAILY_PARAMS,
            "forecast_days": forecast_days,
        },
    )
    resp.raise_for_status()
    data = resp.json()

    return WeatherSnapshot(
        current=CurrentConditions.model_validate(data.get("current")),
        daily=parse_daily_data(data.get("daily") or {}),
    )


def parse_daily_data(raw: dict) -> list[DailyForecast]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DailyForecast objects.

    Every requested column must line up with the "time" column; a short or
    missing column raises ValueError.
    """
    dates = raw.get("time") or []
    if not dates:
        return []

    columns = {key: _column(raw, key, len(dates)) for key in _DAILY_COLUMNS}
    return [
        DailyForecast(
            date=date.fromisoformat(d),
            weather_code=columns["weather_code"][i],
            temperature_2m_max=columns["temperature_2m_max"][i],
            temperature_2m_min=columns["temperature_2m_min"][i],
        )
        for i, d in enumerate(dates)
    ]


def _column(data: dict, key: str, length: int) -> list:
    """Return a daily column, checking it is aligned with the time column."""
    col = data.get(key)
    if col is None or len(col) != length:
        raise ValueError(f"Daily column '{key}' is not aligned with {length} dates")
    return col
