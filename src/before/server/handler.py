"""ASGI handler — translates ASGI scope/messages to before types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through middleware and routing,
and sends Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from before._internal.asgi import Receive, Scope, Send
from before._internal.invoke import invoke
from before.errors import HTTPError
from before.http.request import Request
from before.http.response import Response
from before.middleware.protocol import Next
from before.routing.router import Router
from before.server.errors import handle_http_error, handle_internal_error
from before.server.scripts import CLIENT_SCRIPT_CONTENT_TYPE, CLIENT_SCRIPT_JS
from before.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    debug: bool,
    client_script_path: str | None = None,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:

        async def dispatch(req: Request) -> Response:
            # The client bundle itself; only reachable when client script is enabled.
            if client_script_path is not None and req.path == client_script_path:
                return Response(
                    body=CLIENT_SCRIPT_JS,
                    content_type=CLIENT_SCRIPT_CONTENT_TYPE,
                ).with_header("Cache-Control", "public, max-age=3600")

            match = router.match(req.method, req.path)
            result = await invoke(match.route.handler, req)
            if isinstance(result, Response):
                return result
            return Response(body=str(result))

        # Wrap middleware around the dispatch
        handler = dispatch
        for mw in reversed(middleware):
            outer = handler

            async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
                return await _mw(req, _next)

            handler = make_next

        response = await handler(request)

    except HTTPError as exc:
        response = handle_http_error(exc, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send, head=request.method == "HEAD")
