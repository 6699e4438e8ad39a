"""``before export`` — write the site to static HTML files."""

import argparse
import asyncio
import sys

from before.cli._resolve import resolve_or_exit
from before.errors import ExportError
from before.export import export_site


def run_export(args: argparse.Namespace) -> None:
    """Export every page of the resolved app into ``args.out_dir``."""
    app = resolve_or_exit(args)

    try:
        written = asyncio.run(export_site(app, args.out_dir))
    except ExportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path in written:
        print(path)
    print(f"Exported {len(written)} file(s) to {args.out_dir}")
