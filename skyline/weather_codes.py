# ABOUTME: WMO weather interpretation codes mapped to descriptions and emoji.
# ABOUTME: classify() is total: unknown codes fall back to a thermometer.

from skyline.models import ConditionInfo

UNKNOWN = ConditionInfo(description="Unknown", emoji="🌡️")

WEATHER_CODES: dict[int, ConditionInfo] = {
    code: ConditionInfo(description=desc, emoji=emoji)
    for code, (desc, emoji) in {
        0: ("Clear sky", "☀️"),
        1: ("Mainly clear", "🌤️"),
        2: ("Partly cloudy", "⛅"),
        3: ("Overcast", "☁️"),
        45: ("Foggy", "🌫️"),
        48: ("Depositing rime fog", "🌫️"),
        51: ("Light drizzle", "🌧️"),
        53: ("Moderate drizzle", "🌧️"),
        55: ("Dense drizzle", "🌧️"),
        61: ("Slight rain", "🌧️"),
        63: ("Moderate rain", "🌧️"),
        65: ("Heavy rain", "🌧️"),
        66: ("Light freezing rain", "🌨️"),
        67: ("Heavy freezing rain", "🌨️"),
        71: ("Slight snow", "❄️"),
        73: ("Moderate snow", "❄️"),
        75: ("Heavy snow", "❄️"),
        77: ("Snow grains", "❄️"),
        80: ("Slight rain showers", "🌦️"),
        81: ("Moderate rain showers", "🌦️"),
        82: ("Violent rain showers", "🌧️"),
        85: ("Slight snow showers", "🌨️"),
        86: ("Heavy snow showers", "🌨️"),
        95: ("Thunderstorm", "⛈️"),
        96: ("Thunderstorm with slight hail", "⛈️"),
        99: ("Thunderstorm with heavy hail", "⛈️"),
    }.items()
}


def classify(code: int | None) -> ConditionInfo:
    """Return the description and emoji for a weather code, or the Unknown fallback."""
    if code is None:
        return UNKNOWN
    return WEATHER_CODES.get(code, UNKNOWN)
