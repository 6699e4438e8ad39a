"""Security headers middleware — CSP, X-Content-Type-Options, Referrer-Policy.

Headers are applied only to text/html responses.  A page that opted out
of client script has its script directives replaced by ``script-src 'none'``, so
the browser refuses to run script for that route even if something
upstream adds a tag.
"""

from dataclasses import dataclass

from before.http.request import Request
from before.http.response import Response
from before.middleware.protocol import Next

NO_SCRIPT_DIRECTIVE = "script-src 'none'"

# Directives that would let script run ahead of NO_SCRIPT_DIRECTIVE
_SCRIPT_DIRECTIVES = frozenset({"script-src", "script-src-elem", "script-src-attr"})


@dataclass(frozen=True, slots=True)
class SecurityHeadersConfig:
    """Configuration for security headers.

    All values are applied as-is. Use standard header values.
    """

    x_content_type_options: str = "nosniff"
    referrer_policy: str = "strict-origin-when-cross-origin"
    content_security_policy: str | None = None


def content_security_policy_for(policy: str | None, *, client_script: bool) -> str | None:
    """The CSP header value for a page, or None to send no CSP at all."""
    if client_script:
        return policy
    kept = [
        directive.strip()
        for directive in (policy or "").split(";")
        if directive.strip() and directive_name(directive) not in _SCRIPT_DIRECTIVES
    ]
    return "; ".join([*kept, NO_SCRIPT_DIRECTIVE])


def directive_name(directive: str) -> str:
    """The lower-cased name of a single CSP directive."""
    parts = directive.split(None, 1)
    return parts[0].lower() if parts else ""


def script_src_of(policy: str) -> str | None:
    """The first ``script-src`` directive in *policy*, the one browsers enforce."""
    for directive in policy.split(";"):
        if directive_name(directive) == "script-src":
            return " ".join(directive.split())
    return None


class SecurityHeadersMiddleware:
    """Add security headers to HTML responses.

    Usage::

        app.add_middleware(SecurityHeadersMiddleware(SecurityHeadersConfig(
            content_security_policy="default-src 'self'",
        )))
    """

    __slots__ = ("config",)

    def __init__(self, config: SecurityHeadersConfig | None = None) -> None:
        self.config = config or SecurityHeadersConfig()

    async def __call__(self, request: Request, next: Next) -> Response:
        response = await next(request)
        if not response.is_html:
            return response

        secured = response.with_header(
            "X-Content-Type-Options", self.config.x_content_type_options
        ).with_header("Referrer-Policy", self.config.referrer_policy)

        csp = content_security_policy_for(
            self.config.content_security_policy,
            client_script=response.client_script,
        )
        if csp:
            secured = secured.with_header("Content-Security-Policy", csp)
        return secured
