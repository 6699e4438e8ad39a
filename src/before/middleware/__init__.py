"""Middleware — request/response wrappers applied around routing.

Built-in middleware:

- :class:`ClientScriptInject` attaches the client bundle to full pages
- :class:`SecurityHeadersMiddleware` adds CSP and related headers
"""

from before.middleware.inject import ClientScriptInject
from before.middleware.protocol import Middleware, Next
from before.middleware.security_headers import SecurityHeadersConfig, SecurityHeadersMiddleware

__all__ = [
    "ClientScriptInject",
    "Middleware",
    "Next",
    "SecurityHeadersConfig",
    "SecurityHeadersMiddleware",
]
