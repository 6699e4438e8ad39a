"""Tests for ClientScriptInject."""

from before.app import App
from before.config import AppConfig
from before.http.response import Response
from before.middleware.inject import ClientScriptInject, script_tag
from before.testing import TestClient

PAGE = "<html><body><p>hi</p></body></html>"


def _make_app() -> App:
    app = App(AppConfig(client_script=False))
    app.add_middleware(ClientScriptInject("/static/app.js"))

    @app.route("/page")
    def page(request):
        return PAGE

    @app.route("/quiet")
    def quiet(request):
        return Response(PAGE).without_client_script()

    @app.route("/fragment")
    def fragment(request):
        return "<p>no body tag</p>"

    @app.route("/text")
    def text(request):
        return Response("</body>", content_type="text/plain")

    return app


def test_script_tag_escapes_src() -> None:
    assert script_tag('/a.js?x="1"') == '<script src="/a.js?x=&quot;1&quot;" defer></script>'


async def test_injected_before_body_close() -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get("/page")
    assert response.text == (
        '<html><body><p>hi</p><script src="/static/app.js" defer></script></body></html>'
    )


async def test_opted_out_response_untouched() -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get("/quiet")
    assert response.text == PAGE


async def test_fragment_untouched() -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get("/fragment")
    assert response.text == "<p>no body tag</p>"


async def test_non_html_untouched() -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get("/text")
    assert response.text == "</body>"
