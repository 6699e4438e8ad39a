"""Immutable HTTP request.

Frozen metadata parsed once from the ASGI scope. Pages take no input,
so only the method and path are kept and the body is never read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request."""

    method: str
    path: str

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(method=scope["method"], path=scope["path"])
