"""Before application class.

Mutable during setup (page mounting, route registration, middleware).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kida import Environment

from before._internal.asgi import Receive, Scope, Send
from before.config import AppConfig
from before.http.request import Request
from before.http.response import Response
from before.middleware.inject import ClientScriptInject
from before.middleware.protocol import Middleware
from before.middleware.security_headers import SecurityHeadersConfig, SecurityHeadersMiddleware
from before.pages.types import PageRoute
from before.routing.route import Route
from before.routing.router import Router
from before.server.handler import handle_request
from before.templating.integration import create_environment

logger = logging.getLogger("before.pages")

DEFAULT_PAGES_DIR = Path(__file__).resolve().parent / "site"


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Callable[..., Any]
    methods: list[str] | None
    name: str | None
    page: PageRoute | None = None


class App:
    """The before application.

    Mutable during setup (pages, routes, middleware).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Thread safety:
        The setup phase is single-threaded (module import time).
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the app, even when several ASGI workers call
        ``__call__()`` concurrently on first request.  After freezing,
        the router, middleware, and kida environment are read-only.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_kida_env",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._kida_env: Environment | None = None

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a plain route handler via decorator.

        The handler receives the :class:`Request` and returns a
        :class:`Response` (or a string, served as HTML).

        Args:
            path: URL path.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    # -- Filesystem page routing --

    def mount_pages(self, pages_dir: str | Path | None = None) -> list[PageRoute]:
        """Mount a filesystem-based pages directory.

        Walks the directory and registers a ``GET`` route for every
        route module.  Each page's ``config`` travels with its route and
        decides, per request, whether client script is attached.

        Args:
            pages_dir: Path to the pages directory.  Defaults to
                ``AppConfig.pages_dir``, then to the bundled site.

        Returns:
            The discovered page routes.

        Example::

            app = App()
            app.mount_pages("site")
        """
        from before.pages.discovery import discover_pages

        self._check_not_frozen()

        pages_dir = pages_dir or self.config.pages_dir or DEFAULT_PAGES_DIR
        page_routes = discover_pages(pages_dir)

        for page_route in page_routes:
            self._register_page_handler(page_route)

        logger.info("Mounted %d page(s) from %s", len(page_routes), pages_dir)
        return page_routes

    def _register_page_handler(self, page_route: PageRoute) -> None:
        """Register a single page with a render wrapper."""
        from before.pages.renderer import render_page

        _page = page_route

        async def page_handler(request: Request) -> Response:  # noqa: ARG001
            assert self._kida_env is not None
            return await render_page(self._kida_env, _page, site_name=self.config.site_name)

        self._pending_routes.append(
            _PendingRoute(page_route.url_path, page_handler, ["GET"], name=None, page=page_route)
        )

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware. First added is outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        """All compiled routes, ordered by path. Freezes the app."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router.routes

    @property
    def pages(self) -> list[PageRoute]:
        """All mounted pages, ordered by path. Freezes the app."""
        return [route.page for route in self.routes if route.page is not None]

    # -- Serving --

    def run(
        self,
        host: str | None = None,
        port: int | None = None,
        *,
        app_path: str | None = None,
    ) -> None:
        """Start the server (dev or production based on config.debug).

        Args:
            host: Override bind host.
            port: Override bind port.
            app_path: Import string forwarded to the dev server for reload.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from before.server.dev import run_dev_server

            run_dev_server(self, _host, _port, reload=True, app_path=app_path)
        else:
            from before.server.dev import run_production_server

            run_production_server(
                self,
                _host,
                _port,
                workers=self.config.workers,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            debug=self.config.debug,
            client_script_path=self.config.client_script_path if self.config.client_script else None,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so configuration errors surface
        before the first HTTP request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Compile route table
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(
                Route(
                    path=pending.path,
                    handler=pending.handler,
                    methods=methods,
                    name=pending.name,
                    page=pending.page,
                )
            )
        router.compile()
        self._router = router

        # 2. Capture middleware as immutable tuple. User middleware is
        #    outermost; script injection runs closest to the page so the
        #    security headers see the final body.
        middleware_list: list[Callable[..., Any]] = list(self._middleware_list)
        middleware_list.append(
            SecurityHeadersMiddleware(
                SecurityHeadersConfig(content_security_policy=self.config.content_security_policy)
            )
        )
        if self.config.client_script:
            middleware_list.append(ClientScriptInject(self.config.client_script_path))
        self._middleware = tuple(middleware_list)

        # 3. Initialize kida environment
        self._kida_env = create_environment(self.config)

        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Mount pages and register routes before calling app.run()."
            )
            raise RuntimeError(msg)
