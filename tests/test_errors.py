"""Tests for the before exception hierarchy."""

from before.errors import (
    BeforeError,
    ConfigurationError,
    ExportError,
    HTTPError,
    MarkupError,
    MethodNotAllowed,
    NotFound,
    PageDiscoveryError,
)


def test_hierarchy() -> None:
    for exc_type in (ConfigurationError, PageDiscoveryError, MarkupError, ExportError, HTTPError):
        assert issubclass(exc_type, BeforeError)


def test_not_found() -> None:
    exc = NotFound()
    assert exc.status == 404
    assert str(exc) == "404: Not Found"


def test_method_not_allowed_allow_header() -> None:
    exc = MethodNotAllowed(frozenset({"POST", "GET"}))
    assert exc.status == 405
    assert exc.headers == (("Allow", "GET, HEAD, POST"),)
    assert "GET, HEAD, POST" in exc.detail


def test_method_not_allowed_without_get_omits_head() -> None:
    exc = MethodNotAllowed(frozenset({"POST"}))
    assert exc.headers == (("Allow", "POST"),)


def test_http_error_without_detail() -> None:
    assert str(HTTPError(status=418)) == "418"
