"""``before run`` — development or production server command."""

import argparse

from before.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Start the pounce server for the resolved app.

    Delegates to :meth:`App.run`: ``debug=True`` apps get the
    single-worker reloading dev server, everything else runs
    multi-worker.  ``--host``/``--port`` override the app config.
    """
    app = resolve_or_exit(args)
    app.run(args.host, args.port, app_path=args.app)
