"""Filesystem-based page routing.

The pages directory structure defines URL paths.  Each route module
exports a ``page()`` render function returning a markup tree and,
optionally, a ``config`` :class:`PageConfig` with delivery hints.

Usage::

    app = App()
    app.mount_pages("site")
    app.run()

Conventions:

    site/
      __init__.py        # skipped (underscore)
      page.py            # GET /
      info/
        page.py          # GET /info
      about-us.py        # GET /about-us
"""

from before.pages.discovery import discover_pages
from before.pages.renderer import render_page
from before.pages.types import PageConfig, PageRoute

__all__ = [
    "PageConfig",
    "PageRoute",
    "discover_pages",
    "render_page",
]
