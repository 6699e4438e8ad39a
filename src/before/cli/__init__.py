"""Before CLI — serve, list routes, and export the site.

Entry point registered as ``before`` in ``pyproject.toml``::

    [project.scripts]
    before = "before.cli:main"
"""

import argparse
import logging
import sys

DEFAULT_APP = "before.site:app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``before`` command."""
    parser = argparse.ArgumentParser(
        prog="before",
        description="Before — static pages for the archived Blaseball replay tool.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: the app's AppConfig.log_level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- before run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the dev or production server")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- before routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    # -- before export ----------------------------------------------------
    export_parser = subparsers.add_parser("export", help="Write every page to static HTML")
    export_parser.add_argument("out_dir", help="Output directory")
    export_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.log_level:
        logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "run":
        from before.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from before.cli._routes import run_routes

        run_routes(args)
    elif args.command == "export":
        from before.cli._export import run_export

        run_export(args)
