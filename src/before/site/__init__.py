"""The Before site: the bundled pages, mounted on a ready-to-serve app.

Run it with ``before run`` (the default import string is
``before.site:app``) or export it with ``before export public/``.
"""

from before.app import App

app = App()
app.mount_pages()
