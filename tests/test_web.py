# ABOUTME: Integration tests for the Starlette web surface.
# ABOUTME: Drives the app through TestClient with mocked Open-Meteo responses and an in-memory theme store.

import html

from conftest import LONDON_GEOCODE, forecast_payload, json_response, make_context, mock_client
from starlette.testclient import TestClient

from skyline.view import WeatherView
from skyline.web import create_app, render_page


class TestRenderPage:
    def test_escapes_slot_values(self):
        """Slot text is HTML-escaped in the rendered page."""
        view = WeatherView()
        view.city_name = "<script>alert(1)</script>"
        page = render_page(view, None)

        assert "<script>alert(1)</script>" not in page
        assert html.escape("<script>alert(1)</script>") in page

    def test_light_theme_attribute(self):
        assert '<html lang="en" data-theme="light">' in render_page(WeatherView(), "light")
        assert '<html lang="en">' in render_page(WeatherView(), None)


class TestRoutes:
    def test_search_renders_panel(self):
        """A search redirects to the panel showing the city and forecast.

        Implementation: Mocks geocoding and forecast, follows the redirect.
        Passing implies: The web layer runs the controller and renders the ready view.
        """
        client = mock_client(json_response(LONDON_GEOCODE), json_response(forecast_payload()))
        app = create_app(make_context(client), bootstrap=False)

        with TestClient(app) as http:
            resp = http.get("/search", params={"q": "London"})

        assert resp.status_code == 200
        assert '<main class="ready">' in resp.text
        assert "London" in resp.text
        assert resp.text.count('class="forecast-day"') == 7

    def test_blank_search_leaves_view_idle(self):
        client = mock_client()
        app = create_app(make_context(client), bootstrap=False)

        with TestClient(app) as http:
            resp = http.get("/search", params={"q": "   "}, follow_redirects=False)
            assert resp.status_code == 303
            assert http.get("/api/view").json()["state"] == "idle"
        client.get.assert_not_called()

    def test_not_found_shows_error(self):
        client = mock_client(json_response({"results": []}))
        app = create_app(make_context(client), bootstrap=False)

        with TestClient(app) as http:
            http.get("/search", params={"q": "Xyzzyville"})
            data = http.get("/api/view").json()

        assert data["state"] == "error"
        assert data["error_text"] == "City not found. Try another name."

    def test_theme_toggle(self):
        """Posting to /theme flips the stored theme.

        Implementation: Starts from the dark platform hint and toggles once.
        Passing implies: The page gains the light flag and the JSON view reports it.
        """
        context = make_context(mock_client())
        app = create_app(context, bootstrap=False)

        with TestClient(app) as http:
            assert http.get("/api/view").json()["theme"] == "dark"
            resp = http.post("/theme")
            assert 'data-theme="light"' in resp.text
            assert http.get("/api/view").json()["theme"] == "light"

    def test_bootstrap_loads_default_city(self):
        """Startup loads the default city and sets the search placeholder."""
        client = mock_client(json_response(LONDON_GEOCODE), json_response(forecast_payload()))
        context = make_context(client)
        app = create_app(context, bootstrap=True)

        async def finish_bootstrap():
            await app.state.bootstrap_task

        with TestClient(app) as http:
            http.portal.call(finish_bootstrap)
            data = http.get("/api/view").json()

        assert data["state"] == "ready"
        assert data["city_name"] == "London"
        assert data["search_placeholder"] == "e.g. London, New York, Tokyo"
        client.aclose.assert_awaited_once()
