# ABOUTME: Application context for the weather widget using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient, the display view, and the theme manager.

import httpx
from pydantic import BaseModel, ConfigDict

from skyline import config
from skyline.theme import JsonFileStore, ThemeManager
from skyline.view import WeatherView


class AppContext(BaseModel):
    """Collaborators constructed once at startup and passed to the controller and web layer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    view: WeatherView
    theme: ThemeManager


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client. No retry transport: a failed request fails the search."""
    return httpx.AsyncClient(timeout=config.HTTP_TIMEOUT)


def create_context() -> AppContext:
    return AppContext(
        http_client=create_http_client(),
        view=WeatherView(),
        theme=ThemeManager(JsonFileStore(config.THEME_FILE), platform_hint=config.COLOR_SCHEME),
    )
