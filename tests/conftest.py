"""Shared fixtures: throwaway pages directories for host tests."""

from pathlib import Path
from textwrap import dedent

import pytest

from before.app import App

INTERACTIVE_PAGE = dedent(
    '''
    from before.markup import Element, Paragraph

    title = "Home"


    def page():
        return Element("div", Paragraph("Live games"))
    '''
)

QUIET_PAGE = dedent(
    '''
    from before.markup import Element, Paragraph
    from before.pages.types import PageConfig

    config = PageConfig(disable_client_script=True)


    def page():
        return Element("div", Paragraph("Just prose"))
    '''
)


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """A pages directory with one interactive page and one that opts out.

    ::

        pages/
          page.py          # GET /        (client script)
          quiet/page.py    # GET /quiet   (no client script)
    """
    root = tmp_path / "pages"
    (root / "quiet").mkdir(parents=True)
    (root / "page.py").write_text(INTERACTIVE_PAGE, encoding="utf-8")
    (root / "quiet" / "page.py").write_text(QUIET_PAGE, encoding="utf-8")
    return root


@pytest.fixture
def app(pages_dir: Path) -> App:
    """An app with the throwaway pages and the bundled Info page."""
    app = App()
    app.mount_pages(pages_dir)
    app.mount_pages()
    return app
