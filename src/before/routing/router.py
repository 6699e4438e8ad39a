"""Compiled router with exact path matching.

Routes are registered during setup and compiled into an immutable
lookup table when the app freezes.  Pages have no path parameters,
so a path is matched by a single dict lookup.
"""

from before.errors import ConfigurationError, MethodNotAllowed, NotFound
from before.routing.route import Route, RouteMatch


def normalize_path(path: str) -> str:
    """Collapse duplicate slashes and drop the trailing slash.

    ``"/info/"`` -> ``"/info"``; ``""`` -> ``"/"``.
    """
    parts = [p for p in path.split("/") if p]
    return "/" + "/".join(parts)


class Router:
    """Compiled router.

    Usage::

        router = Router()
        router.add(Route("/info", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/info")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        # path -> method -> route
        self._routes: dict[str, dict[str, Route]] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        by_method = self._routes.setdefault(normalize_path(route.path), {})
        for method in route.methods:
            if method in by_method:
                msg = f"Duplicate route: {method} {route.path}"
                raise ConfigurationError(msg)
            by_method[method] = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, ordered by path."""
        seen: set[int] = set()
        result: list[Route] = []
        for path in sorted(self._routes):
            for route in self._routes[path].values():
                if id(route) not in seen:
                    seen.add(id(route))
                    result.append(route)
        return result

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        ``HEAD`` falls back to the ``GET`` route.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        by_method = self._routes.get(normalize_path(path))
        if not by_method:
            raise NotFound(f"No route matches {method} {path!r}")

        route = by_method.get(method)
        if route is None and method == "HEAD":
            route = by_method.get("GET")
        if route is None:
            raise MethodNotAllowed(frozenset(by_method))
        return RouteMatch(route=route)
