"""Before — static pages for the archived Blaseball replay tool.

Pages are plain Python modules that return an immutable markup tree and
declare delivery hints for the host.  The host discovers them on disk,
renders them into the site shell, and decides per page whether to ship
client script.

Basic usage::

    from before import App

    app = App()
    app.mount_pages("site")
    app.run()

A page module::

    from before import PageConfig
    from before.markup import Element, Paragraph

    config = PageConfig(disable_client_script=True)

    def page():
        return Element("div", Paragraph("Hello"))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BeforeError",
    "ConfigurationError",
    "HTTPError",
    "MarkupError",
    "MethodNotAllowed",
    "NotFound",
    "PageConfig",
    "PageDiscoveryError",
    "Request",
    "Response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import before`` fast while providing a clean top-level API.
    """
    if name == "App":
        from before.app import App

        return App

    if name == "AppConfig":
        from before.config import AppConfig

        return AppConfig

    if name == "PageConfig":
        from before.pages.types import PageConfig

        return PageConfig

    if name in ("Request", "Response"):
        from before import http as _http

        return getattr(_http, name)

    if name in (
        "BeforeError",
        "ConfigurationError",
        "HTTPError",
        "MarkupError",
        "MethodNotAllowed",
        "NotFound",
        "PageDiscoveryError",
    ):
        from before import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
