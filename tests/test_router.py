"""Tests for before.routing.router."""

import pytest

from before.errors import ConfigurationError, MethodNotAllowed, NotFound
from before.routing.route import Route
from before.routing.router import Router, normalize_path


def _handler() -> str:
    return "ok"


def _router(*routes: Route) -> Router:
    router = Router()
    for route in routes:
        router.add(route)
    router.compile()
    return router


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("/", "/"), ("", "/"), ("/info/", "/info"), ("//info//tips", "/info/tips")],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_path(raw) == expected


class TestMatch:
    def test_exact_match(self) -> None:
        route = Route("/info", _handler, frozenset({"GET"}))
        assert _router(route).match("GET", "/info").route is route

    def test_trailing_slash_matches(self) -> None:
        route = Route("/info", _handler, frozenset({"GET"}))
        assert _router(route).match("GET", "/info/").route is route

    def test_head_falls_back_to_get(self) -> None:
        route = Route("/info", _handler, frozenset({"GET"}))
        assert _router(route).match("HEAD", "/info").route is route

    def test_not_found(self) -> None:
        router = _router(Route("/info", _handler, frozenset({"GET"})))
        with pytest.raises(NotFound):
            router.match("GET", "/missing")

    def test_method_not_allowed_lists_methods(self) -> None:
        router = _router(Route("/info", _handler, frozenset({"GET"})))
        with pytest.raises(MethodNotAllowed) as exc_info:
            router.match("POST", "/info")
        assert exc_info.value.status == 405
        assert exc_info.value.headers == (("Allow", "GET, HEAD"),)


class TestRegistration:
    def test_cannot_add_after_compile(self) -> None:
        router = _router()
        with pytest.raises(RuntimeError, match="after compilation"):
            router.add(Route("/info", _handler, frozenset({"GET"})))

    def test_duplicate_route_rejected(self) -> None:
        router = Router()
        router.add(Route("/info", _handler, frozenset({"GET"})))
        with pytest.raises(ConfigurationError, match="Duplicate route: GET /info"):
            router.add(Route("/info/", _handler, frozenset({"GET"})))

    def test_routes_sorted_by_path(self) -> None:
        router = _router(
            Route("/z", _handler, frozenset({"GET"})),
            Route("/a", _handler, frozenset({"GET", "POST"})),
        )
        assert [r.path for r in router.routes] == ["/a", "/z"]
