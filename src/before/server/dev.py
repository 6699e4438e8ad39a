"""Pounce server runners.

Pounce's ``run()`` takes an import string (e.g., ``"before.site:app"``),
but before hands over a live ``App`` object, so ``pounce.Server`` is used
directly with the ASGI callable.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = True,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server with auto-reload.

    Args:
        app: ASGI callable (before App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes (default True).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle so
            that page edits on disk take effect immediately.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=(".py", ".html"),
    )
    server = Server(config, app, app_path=app_path)
    server.run()


def run_production_server(
    app: object,
    host: str,
    port: int,
    *,
    workers: int = 0,
    log_level: str = "info",
) -> None:
    """Start a multi-worker pounce server.

    Args:
        app: ASGI callable (before App instance).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count; 0 lets pounce pick from the CPU count.
        log_level: Pounce log level.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    server.run()
