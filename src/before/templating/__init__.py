"""Templating — the kida environment that renders the site shell."""
