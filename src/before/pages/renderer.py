"""Page rendering: markup tree -> full HTML document.

Calls a page's render function, serializes the returned tree, and
places it inside the site shell template.  The resulting ``Response``
carries the page's client-script decision for the middleware to honor.
"""

from __future__ import annotations

from kida import Environment
from kida.utils.html import Markup

from before._internal.invoke import invoke
from before.http.response import Response
from before.markup import render_html
from before.pages.types import PageRoute
from before.templating.integration import SHELL_TEMPLATE


def document_title(page_title: str, site_name: str) -> str:
    """``"Info"``, ``"Before"`` -> ``"Info - Before"``."""
    if page_title and page_title != site_name:
        return f"{page_title} - {site_name}"
    return site_name


def render_document(env: Environment, *, content_html: str, title: str) -> str:
    """Place pre-rendered page HTML into the site shell."""
    template = env.get_template(SHELL_TEMPLATE)
    return template.render(
        {
            "document_title": title,
            "content": Markup(content_html),
        }
    )


async def render_page(env: Environment, page: PageRoute, *, site_name: str) -> Response:
    """Render *page* to a full-document ``Response``.

    A fresh tree is built on every call; nothing is cached between
    requests.
    """
    tree = await invoke(page.render)
    body = render_document(
        env,
        content_html=render_html(tree),
        title=document_title(page.title, site_name),
    )
    response = Response(body=body)
    if page.config.disable_client_script:
        response = response.without_client_script()
    return response
