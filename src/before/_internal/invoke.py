"""Invoke helpers — call sync or async render functions uniformly.

Page ``page()`` functions are usually plain ``def``, but an ``async def``
render function is accepted too.  This module keeps the sync/async check
in exactly one place.

Usage::

    from before._internal.invoke import invoke

    tree = await invoke(route.render)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
