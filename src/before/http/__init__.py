"""HTTP primitives — immutable Request and chainable Response."""

from before.http.request import Request
from before.http.response import Response

__all__ = ["Request", "Response"]
