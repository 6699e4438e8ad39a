"""App import resolution — resolves ``"module:attribute"`` strings to App instances.

Shared utility used by every ``before`` subcommand to locate an App
from a user-supplied import string.
"""

import argparse
import importlib
import logging
import sys

from before.app import App


def resolve_app(import_string: str) -> App:
    """Resolve an import string to a before App instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"before.site"`` resolves to
    ``before.site.app``).

    Supports factory functions: if the resolved object is callable and
    not an App instance, it will be called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an ``App`` or factory.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a before.App instance"
        raise TypeError(msg)

    return obj


def resolve_or_exit(args: argparse.Namespace) -> App:
    """Resolve ``args.app``, printing the error and exiting 1 on failure.

    Also configures logging from the app's config unless ``--log-level``
    was given on the command line.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not getattr(args, "log_level", None):
        logging.basicConfig(
            level=app.config.log_level.upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )
    return app
