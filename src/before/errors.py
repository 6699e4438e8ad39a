"""Before exception hierarchy.

Shared across the router, app, page discovery, and the markup tree so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class BeforeError(Exception):
    """Base for all before-specific errors."""


class ConfigurationError(BeforeError):
    """Raised when app configuration is invalid.

    Typically raised during ``App.mount_pages()`` or ``App._freeze()``
    at startup, never while serving a request.
    """


class PageDiscoveryError(ConfigurationError):
    """A page module does not follow the discovery convention.

    Each route module must export a callable ``page``.  An optional
    ``config`` must be a :class:`~before.pages.types.PageConfig`.
    """


class MarkupError(BeforeError):
    """Raised when a markup node is constructed with invalid fields."""


@dataclass(frozen=True, slots=True)
class HTTPError(BeforeError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or handlers. The ASGI handler catches these
    and turns them into plain responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods. ``HEAD`` is
    listed whenever ``GET`` is, since GET routes also answer HEAD.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        if "GET" in allowed:
            allowed = allowed | {"HEAD"}
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class ExportError(BeforeError):
    """A page could not be exported (the app answered with a non-200 status)."""
