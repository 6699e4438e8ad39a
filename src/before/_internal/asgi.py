"""ASGI type aliases and an in-process request driver.

``call_app`` sends one HTTP request through an ASGI callable without a
socket.  The test client and the static exporter both use it, so pages
are exported through exactly the pipeline that serves them.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


def build_scope(
    method: str,
    path: str,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Build a minimal ASGI 3.0 HTTP scope for *method* and *path*."""
    if "?" in path:
        path_part, query_string = path.split("?", 1)
    else:
        path_part = path
        query_string = ""

    raw_headers: list[tuple[bytes, bytes]] = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "path": path_part,
        "raw_path": path_part.encode("latin-1"),
        "query_string": query_string.encode("latin-1"),
        "root_path": "",
        "headers": raw_headers,
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }


async def call_app(
    app: ASGIApp,
    method: str,
    path: str,
    *,
    headers: dict[str, str] | None = None,
) -> tuple[int, list[tuple[bytes, bytes]], bytes]:
    """Run one request through *app* and capture what it sends.

    Returns:
        ``(status, raw_headers, body)`` as sent by the app.
    """
    scope = build_scope(method, path, headers)
    body_sent = False

    async def receive() -> dict[str, Any]:
        nonlocal body_sent
        if not body_sent:
            body_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        return {"type": "http.disconnect"}

    status = 200
    raw_headers: list[tuple[bytes, bytes]] = []
    body_parts: list[bytes] = []

    async def send(message: MutableMapping[str, Any]) -> None:
        nonlocal status, raw_headers
        if message["type"] == "http.response.start":
            status = message["status"]
            raw_headers = list(message.get("headers", []))
        elif message["type"] == "http.response.body":
            body_parts.append(message.get("body", b""))

    await app(scope, receive, send)
    return status, raw_headers, b"".join(body_parts)
