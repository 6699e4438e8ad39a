"""Data models for filesystem-based page routing.

Immutable frozen dataclasses representing page configuration and
discovered page routes.  Built once at app startup during discovery.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from before.markup import Node


@dataclass(frozen=True, slots=True)
class PageConfig:
    """Delivery hints a page module declares for the host.

    Declared once as a module-level ``config`` in a page module and read
    by the host on every request::

        config = PageConfig(disable_client_script=True)

    Attributes:
        disable_client_script: Serve the page without attaching or
            executing any client script.  The host omits the script tag
            and sends ``script-src 'none'`` in the page's CSP.
    """

    disable_client_script: bool = False

    def as_dict(self) -> dict[str, Any]:
        """Serialized form, keyed the way the site's frontend names them."""
        return {"disableClientScript": self.disable_client_script}


@dataclass(frozen=True, slots=True)
class PageRoute:
    """A discovered page route.

    Built during filesystem discovery.  Used by ``mount_pages()`` to
    register routes with the app.

    Attributes:
        url_path: URL path (e.g., ``/info``).
        render: The page's ``page()`` render function.
        config: The page's declared :class:`PageConfig`.
        title: Document title for the site shell.
        module_path: Filesystem path of the page module.
    """

    url_path: str
    render: Callable[[], Node]
    config: PageConfig = field(default_factory=PageConfig)
    title: str = ""
    module_path: str = ""
