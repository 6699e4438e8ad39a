"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONTENT_SECURITY_POLICY = (
    "default-src 'self'; base-uri 'self'; frame-ancestors 'none'; object-src 'none'"
)


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, client_script=False)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count

    # Pages (None = the bundled site/ directory)
    pages_dir: str | Path | None = None
    site_name: str = "Before"

    # Client script payload, attached to every full page that doesn't opt out
    client_script: bool = True
    client_script_path: str = "/_before/client.js"

    # Security
    content_security_policy: str | None = DEFAULT_CONTENT_SECURITY_POLICY

    # Logging
    log_level: str = "info"
