"""Filesystem route discovery for the pages directory.

Walks the pages directory tree and discovers ``.py`` route modules.

``page.py`` maps to the directory URL; other ``.py`` files append
their stem to the path.  Files and directories starting with ``_``
or ``.`` are skipped, so a pages directory can also be a Python
package with an ``__init__.py``.

Each route module follows one convention::

    config = PageConfig(disable_client_script=True)   # optional
    title = "Info"                                    # optional

    def page() -> Node:                               # required
        ...
"""

from __future__ import annotations

import importlib.util
import logging
from pathlib import Path

from before.errors import PageDiscoveryError
from before.pages.types import PageConfig, PageRoute

logger = logging.getLogger("before.pages")


def discover_pages(pages_dir: str | Path) -> list[PageRoute]:
    """Walk a pages directory and discover all routes.

    Args:
        pages_dir: Path to the pages directory.

    Returns:
        List of discovered :class:`PageRoute` objects ready for
        registration with the app, in path order.

    Raises:
        FileNotFoundError: If *pages_dir* is not a directory.
        PageDiscoveryError: If a route module breaks the convention.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    routes: list[PageRoute] = []
    _walk_directory(root, url_parts=[], routes=routes)
    return routes


def _walk_directory(
    directory: Path,
    *,
    url_parts: list[str],
    routes: list[PageRoute],
) -> None:
    """Recursively walk a directory, discovering route modules."""
    for item in sorted(directory.iterdir()):
        if not item.is_file() or item.suffix != ".py":
            continue
        if item.name.startswith("_"):
            continue
        routes.append(_load_route_file(item, url_parts=url_parts))

    for item in sorted(directory.iterdir()):
        if not item.is_dir():
            continue
        if item.name.startswith("_") or item.name.startswith("."):
            continue
        _walk_directory(item, url_parts=[*url_parts, item.name], routes=routes)


def _url_path_for(file: Path, url_parts: list[str]) -> str:
    if file.stem == "page":
        parts = url_parts
    else:
        parts = [*url_parts, file.stem]
    return "/" + "/".join(parts) if parts else "/"


def _default_title(file: Path, url_parts: list[str]) -> str:
    """``about-us.py`` -> ``"About Us"``; ``info/page.py`` -> ``"Info"``."""
    if file.stem != "page":
        stem = file.stem
    elif url_parts:
        stem = url_parts[-1]
    else:
        return ""
    return stem.replace("-", " ").replace("_", " ").title()


def _load_route_file(file: Path, *, url_parts: list[str]) -> PageRoute:
    """Load a route .py file and read its ``page``, ``config``, and ``title``."""
    module_name = f"_page_{file.stem}_{id(file)}"
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        raise PageDiscoveryError(f"Cannot load page module: {file}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    url_path = _url_path_for(file, url_parts)

    render = getattr(module, "page", None)
    if render is None or not callable(render):
        raise PageDiscoveryError(
            f"{file} (route {url_path}) must define a callable 'page' render function"
        )

    config = getattr(module, "config", None)
    if config is None:
        config = PageConfig()
    elif not isinstance(config, PageConfig):
        raise PageDiscoveryError(
            f"{file} (route {url_path}): 'config' must be a PageConfig, "
            f"got {type(config).__name__}"
        )

    title = getattr(module, "title", None)
    if title is None:
        title = _default_title(file, url_parts)

    logger.debug(
        "Discovered page %s (%s) client_script=%s",
        url_path,
        file,
        not config.disable_client_script,
    )
    return PageRoute(
        url_path=url_path,
        render=render,
        config=config,
        title=str(title),
        module_path=str(file),
    )
