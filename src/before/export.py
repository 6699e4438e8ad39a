"""Static export — write every mounted page to disk as HTML.

Each page is requested through the app's own ASGI pipeline, so the
exported files are byte-for-byte what the server would send, middleware
included.  A page that opted out of client script is exported without
a script tag.
"""

import logging
from pathlib import Path

from before._internal.asgi import call_app
from before.app import App
from before.errors import ExportError

logger = logging.getLogger("before.export")


def output_path_for(url_path: str, out_dir: Path) -> Path:
    """``/`` -> ``out/index.html``; ``/info`` -> ``out/info/index.html``."""
    parts = [p for p in url_path.split("/") if p]
    return out_dir.joinpath(*parts, "index.html")


async def export_site(app: App, out_dir: str | Path) -> list[Path]:
    """Render every mounted page into *out_dir*.

    Returns:
        The written file paths: pages in path order, then the client
        script bundle if any exported page loads it.

    Raises:
        ExportError: If any page responds with a non-200 status.
    """
    out = Path(out_dir)
    written: list[Path] = []

    for page in app.pages:
        status, _headers, body = await call_app(app, "GET", page.url_path)
        if status != 200:
            raise ExportError(f"GET {page.url_path} returned {status}")

        target = output_path_for(page.url_path, out)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(body)
        logger.info("Exported %s -> %s", page.url_path, target)
        written.append(target)

    # The bundle is only needed when some exported page loads it
    needs_bundle = any(not page.config.disable_client_script for page in app.pages)
    if app.config.client_script and needs_bundle:
        script_path = app.config.client_script_path
        status, _headers, body = await call_app(app, "GET", script_path)
        if status != 200:
            raise ExportError(f"GET {script_path} returned {status}")
        target = out.joinpath(*[p for p in script_path.split("/") if p])
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(body)
        logger.info("Exported client script -> %s", target)
        written.append(target)

    return written
