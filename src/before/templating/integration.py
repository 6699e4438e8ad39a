"""Kida environment setup.

Creates the kida Environment that renders the site shell.  The
environment is created once during ``App._freeze()`` and passed
through the request pipeline.
"""

from pathlib import Path

from kida import Environment, FileSystemLoader

from before.config import AppConfig

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SHELL_TEMPLATE = "_shell.html"


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    Called once during ``App._freeze()``. The returned environment
    is immutable for the lifetime of the app.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        auto_reload=config.debug,
        trim_blocks=True,
        lstrip_blocks=True,
    )
