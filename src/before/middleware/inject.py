"""Client script injection middleware.

Attaches the site's client script payload (a ``<script>`` tag) to every
full ``text/html`` page, before ``</body>``.  Pages whose config sets
``disable_client_script`` are served untouched: the response arrives
with ``client_script=False`` and no tag is added.
"""

import html
from dataclasses import replace

from before.http.request import Request
from before.http.response import Response
from before.middleware.protocol import Next


def script_tag(src: str) -> str:
    """The tag that loads the client bundle from *src*."""
    return f'<script src="{html.escape(src, quote=True)}" defer></script>'


class ClientScriptInject:
    """Middleware that injects the client script tag into HTML pages.

    Only full documents are touched: the snippet goes in **only** when
    the *before* target string is found in the body, so HTML fragments
    and error bodies pass through unchanged.

    Usage::

        app.add_middleware(ClientScriptInject("/_before/client.js"))
    """

    __slots__ = ("_snippet", "_target")

    def __init__(self, src: str, *, before: str = "</body>") -> None:
        self._snippet = script_tag(src)
        self._target = before

    async def __call__(self, request: Request, next: Next) -> Response:
        """Inject the snippet into HTML pages that allow client script."""
        response = await next(request)

        if not response.is_html or not response.client_script:
            return response

        body = response.text
        if self._target not in body:
            return response
        body = body.replace(self._target, self._snippet + self._target, 1)
        return replace(response, body=body)
