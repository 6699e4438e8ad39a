"""``before routes`` — list registered routes.

Prints METHOD, PATH, SCRIPT, and handler info, where SCRIPT says whether
the host attaches the client script payload to the route.
"""

import argparse

from before.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for an app."""
    app = resolve_or_exit(args)

    routes = app.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(sorted(route.methods))
        if route.page is not None:
            script = "no" if route.page.config.disable_client_script else "yes"
            handler_name = route.page.module_path
        else:
            script = "yes"
            handler_name = getattr(route.handler, "__name__", str(route.handler))
        if not app.config.client_script:
            script = "no"
        rows.append((methods_str, route.path, script, handler_name))

    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{:<6}}  {{}}"
    print(fmt.format("METHOD", "PATH", "SCRIPT", "HANDLER"))
    sep_len = max_methods + max_path + 12 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
