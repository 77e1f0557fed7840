# ABOUTME: Pydantic BaseModels and enums for locations, weather snapshots, and display state.
# ABOUTME: Defines the structured types shared by the service, view, controller, and theme layers.

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """Best-ranked geocoding match for a search query."""

    model_config = ConfigDict(frozen=True)

    name: str
    country_code: str | None = None
    latitude: float
    longitude: float
    timezone: str = "UTC"


class CurrentConditions(BaseModel):
    """Current-conditions block of the Open-Meteo forecast response."""

    model_config = ConfigDict(frozen=True)

    temperature_2m: float
    apparent_temperature: float
    relative_humidity_2m: int
    wind_speed_10m: float
    weather_code: int | None = None


class DailyForecast(BaseModel):
    """One day of the daily forecast."""

    model_config = ConfigDict(frozen=True)

    date: date
    weather_code: int | None = None
    temperature_2m_max: float | None = None
    temperature_2m_min: float | None = None


class WeatherSnapshot(BaseModel):
    """Parsed forecast response: current conditions plus ordered daily records."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    daily: list[DailyForecast] = []


class ConditionInfo(BaseModel):
    """Human description and pictogram for a weather condition code."""

    model_config = ConfigDict(frozen=True)

    description: str
    emoji: str


class ForecastRow(BaseModel):
    """Display-ready forecast list entry."""

    model_config = ConfigDict(frozen=True)

    day: str
    emoji: str
    max_temp: str
    min_temp: str


class DisplayState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
