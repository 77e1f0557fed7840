# ABOUTME: ASGI web entry point for the Skyline weather widget.
# ABOUTME: Starlette app rendering the weather panel, running searches, and toggling the theme.

import asyncio
import contextlib
import logging
from html import escape
from string import Template

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.routing import Route

from skyline import config
from skyline.controller import SearchController
from skyline.deps import AppContext, create_context
from skyline.view import WeatherView

logger = logging.getLogger(__name__)

PAGE = Template(
    """<!doctype html>
<html lang="en"$theme_attr>
<head>
<meta charset="utf-8">
<title>Skyline Weather</title>
<style>
  body { font-family: system-ui, sans-serif; background: #0f172a; color: #e2e8f0; margin: 2rem; }
  [data-theme="light"] body { background: #f8fafc; color: #0f172a; }
  main .loading, main .error-message, main .weather { display: none; }
  main.loading .loading, main.error .error-message, main.ready .weather { display: block; }
  main.error .weather { display: block; opacity: 0.4; }
  .forecast { list-style: none; padding: 0; }
  .forecast li { display: flex; gap: 1rem; }
</style>
</head>
<body>
<header>
  <form action="/search" method="get">
    <input name="q" placeholder="$placeholder" autocomplete="off">
    <button type="submit">Search</button>
  </form>
  <form action="/theme" method="post"><button type="submit">Toggle theme</button></form>
</header>
<main class="$state">
  <p class="loading">Loading&hellip;</p>
  <p class="error-message">$error_text</p>
  <section class="weather">
    <h1><span>$city_name</span> <small>$country</small></h1>
    <p><span>$weather_emoji</span> <strong>$current_temp&deg;</strong> $weather_desc</p>
    <p>Feels like $feels_like &middot; Humidity $humidity &middot; Wind $wind_speed</p>
    <ul class="forecast">
$forecast
    </ul>
  </section>
</main>
</body>
</html>
"""
)

ROW = Template(
    '      <li><span class="forecast-day">$day</span> <span class="forecast-emoji">$emoji</span> '
    '<span class="forecast-temps"><span>$max_temp&deg;</span> <span>$min_temp&deg;</span></span></li>'
)


def render_page(view: WeatherView, data_theme: str | None) -> str:
    """Render the weather panel as a full HTML document."""
    slots = {key: escape(str(value)) for key, value in view.as_dict().items() if key != "forecast"}
    forecast = "\n".join(ROW.substitute({k: escape(v) for k, v in row.model_dump().items()}) for row in view.forecast)
    theme_attr = f' data-theme="{escape(data_theme)}"' if data_theme else ""
    return PAGE.substitute(slots, placeholder=slots["search_placeholder"], forecast=forecast, theme_attr=theme_attr)


def create_app(context: AppContext | None = None, bootstrap: bool = True) -> Starlette:
    """Build the Starlette app around one application context.

    Startup applies the stored theme and, when ``bootstrap`` is set, loads the
    default city in the background so a user search can start right away.
    """
    context = context or create_context()
    controller = SearchController(context)

    @contextlib.asynccontextmanager
    async def lifespan(app):
        logging.basicConfig(level=config.LOG_LEVEL)
        context.theme.initialize()
        task = asyncio.create_task(controller.bootstrap()) if bootstrap else None
        app.state.bootstrap_task = task
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
            await context.http_client.aclose()

    async def index(request: Request) -> HTMLResponse:
        return HTMLResponse(render_page(context.view, context.theme.data_theme))

    async def search(request: Request) -> RedirectResponse:
        await controller.search(request.query_params.get("q", ""))
        return RedirectResponse("/", status_code=303)

    async def toggle_theme(request: Request) -> RedirectResponse:
        context.theme.toggle()
        return RedirectResponse("/", status_code=303)

    async def view_json(request: Request) -> JSONResponse:
        data = context.view.as_dict()
        data["theme"] = context.theme.current_theme().value
        return JSONResponse(data)

    app = Starlette(
        routes=[
            Route("/", index),
            Route("/search", search),
            Route("/theme", toggle_theme, methods=["POST"]),
            Route("/api/view", view_json),
        ],
        lifespan=lifespan,
    )
    app.state.context = context
    app.state.controller = controller
    return app


app = create_app()
