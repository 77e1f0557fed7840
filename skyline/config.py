# ABOUTME: Environment-driven settings for the Skyline weather widget.
# ABOUTME: Reads .env via python-dotenv and exposes module-level constants with defaults.

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = os.environ.get("SKYLINE_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_URL = os.environ.get("SKYLINE_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

DEFAULT_CITY = os.environ.get("SKYLINE_DEFAULT_CITY", "London")

# Where the theme preference is persisted between sessions
THEME_FILE = Path(
    os.environ.get("SKYLINE_THEME_FILE", str(Path.home() / ".config" / "skyline" / "settings.json"))
).expanduser()

# Platform light/dark hint used when no preference is stored yet
COLOR_SCHEME = os.environ.get("SKYLINE_COLOR_SCHEME", "dark").strip().lower()

HTTP_TIMEOUT = float(os.environ.get("SKYLINE_HTTP_TIMEOUT", "10"))

GUARD_STALE_RESULTS = os.environ.get("SKYLINE_GUARD_STALE_RESULTS", "false").strip().lower() in ("1", "true", "yes")

LOG_LEVEL = os.environ.get("SKYLINE_LOG_LEVEL", "INFO").upper()
