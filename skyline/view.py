# ABOUTME: Display model for the weather panel: named output slots, forecast rows, and state.
# ABOUTME: Projects a Location + WeatherSnapshot into display strings; no HTML or transport concerns.

import math

from skyline.day_labels import format_day
from skyline.models import DisplayState, ForecastRow, WeatherSnapshot
from skyline.weather_codes import classify


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


class WeatherView:
    """Named display slots for the weather panel.

    The controller drives ``state`` and ``error_text``; the render methods fill
    the current-conditions slots and the forecast list. A failed search leaves
    the last successful render in place underneath the error state.
    """

    def __init__(self):
        self.state = DisplayState.IDLE
        self.error_text = ""
        self.search_placeholder = ""
        self.city_name = ""
        self.country = ""
        self.current_temp = ""
        self.weather_desc = ""
        self.weather_emoji = ""
        self.feels_like = ""
        self.humidity = ""
        self.wind_speed = ""
        self.forecast: list[ForecastRow] = []

    def set_state(self, state: DisplayState) -> None:
        self.state = state

    def show_error(self, message: str) -> None:
        self.set_state(DisplayState.ERROR)
        self.error_text = message

    def render_current(self, snapshot: WeatherSnapshot, location_name: str, country_code: str | None) -> None:
        """Write the current-conditions slots for a location."""
        cur = snapshot.current
        info = classify(cur.weather_code)

        self.city_name = location_name
        self.country = country_code or ""
        self.current_temp = str(round_half_up(cur.temperature_2m))
        self.weather_desc = info.description
        self.weather_emoji = info.emoji
        self.feels_like = f"{round_half_up(cur.apparent_temperature)}°"
        self.humidity = f"{cur.relative_humidity_2m}%"
        self.wind_speed = f"{round_half_up(cur.wind_speed_10m)} km/h"

    def render_forecast(self, snapshot: WeatherSnapshot) -> None:
        """Replace the forecast list with one row per daily record."""
        self.forecast = [
            ForecastRow(
                day=format_day(day.date),
                emoji=classify(day.weather_code).emoji,
                max_temp=_format_temp(day.temperature_2m_max),
                min_temp=_format_temp(day.temperature_2m_min),
            )
            for day in snapshot.daily
        ]

    def as_dict(self) -> dict:
        """All slots as JSON-ready values."""
        return {
            "state": self.state.value,
            "error_text": self.error_text,
            "search_placeholder": self.search_placeholder,
            "city_name": self.city_name,
            "country": self.country,
            "current_temp": self.current_temp,
            "weather_desc": self.weather_desc,
            "weather_emoji": self.weather_emoji,
            "feels_like": self.feels_like,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "forecast": [row.model_dump() for row in self.forecast],
        }


def _format_temp(value: float | None) -> str:
    if value is None:
        return "-"
    return str(round_half_up(value))
