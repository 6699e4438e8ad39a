"""Tests for SecurityHeadersMiddleware and the no-script CSP directive."""

import pytest

from before.app import App
from before.config import AppConfig
from before.http.response import Response
from before.middleware.security_headers import (
    NO_SCRIPT_DIRECTIVE,
    SecurityHeadersConfig,
    SecurityHeadersMiddleware,
    content_security_policy_for,
    script_src_of,
)
from before.testing import TestClient, assert_no_client_script


class TestPolicyFor:
    def test_script_allowed_keeps_policy(self) -> None:
        assert content_security_policy_for("default-src 'self'", client_script=True) == (
            "default-src 'self'"
        )

    def test_script_disabled_appends_directive(self) -> None:
        assert content_security_policy_for("default-src 'self';", client_script=False) == (
            "default-src 'self'; script-src 'none'"
        )

    def test_script_disabled_without_policy(self) -> None:
        assert content_security_policy_for(None, client_script=False) == NO_SCRIPT_DIRECTIVE

    def test_no_policy_no_header(self) -> None:
        assert content_security_policy_for(None, client_script=True) is None

    def test_script_disabled_replaces_existing_script_directives(self) -> None:
        policy = "default-src 'self'; script-src 'self'; Script-Src-Elem https://cdn.test; img-src *"
        assert content_security_policy_for(policy, client_script=False) == (
            "default-src 'self'; img-src *; script-src 'none'"
        )

    def test_enforced_script_src_is_the_first_one(self) -> None:
        assert script_src_of("script-src 'self'; script-src 'none'") == "script-src 'self'"
        assert script_src_of("default-src 'self'") is None


def _make_app() -> App:
    app = App()
    app.add_middleware(
        SecurityHeadersMiddleware(SecurityHeadersConfig(content_security_policy="default-src 'self'"))
    )

    @app.route("/")
    def index(request):
        return "Hello"

    @app.route("/quiet")
    def quiet(request):
        return Response("Hush").without_client_script()

    @app.route("/data")
    def data(request):
        return Response('{"ok": true}', content_type="application/json")

    return app


@pytest.mark.parametrize(
    ("path", "expected"),
    [("/", "default-src 'self'"), ("/quiet", "default-src 'self'; script-src 'none'")],
)
async def test_html_responses_get_csp(path: str, expected: str) -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get(path)
    assert response.header("x-content-type-options") == "nosniff"
    assert response.header("referrer-policy") == "strict-origin-when-cross-origin"
    csp_values = [v for k, v in response.headers if k == "content-security-policy"]
    assert expected in csp_values


async def test_non_html_skipped() -> None:
    async with TestClient(_make_app()) as client:
        response = await client.get("/data")
    assert response.header("x-content-type-options") is None
    assert response.header("content-security-policy") is None


async def test_configured_script_src_cannot_reenable_script_on_quiet_page() -> None:
    app = App(AppConfig(content_security_policy="default-src 'self'; script-src 'self'"))

    @app.route("/quiet")
    def quiet(request):
        return Response("Hush").without_client_script()

    async with TestClient(app) as client:
        response = await client.get("/quiet")
    assert response.header("content-security-policy") == "default-src 'self'; script-src 'none'"
    assert_no_client_script(response)


def test_assertion_rejects_script_src_shadowed_by_an_earlier_one() -> None:
    response = Response("Hush").with_header(
        "Content-Security-Policy", "script-src 'self'; script-src 'none'"
    )
    with pytest.raises(AssertionError, match="enforced script-src"):
        assert_no_client_script(response)
