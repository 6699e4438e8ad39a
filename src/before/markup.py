"""Markup-as-data: an immutable tree of renderable nodes.

Pages return a tree of these nodes instead of raw HTML strings so the
host can serialize, inspect, and extract text from the same structure.
Each node kind carries only the fields relevant to it; a ``Link`` has an
``href`` and a ``label``, a ``Text`` has a value and nothing else.

Nodes are frozen and their children are tuples, so a tree is complete the
moment its root is constructed and can be shared freely between threads.

Usage::

    from before.markup import Element, Link, Paragraph, render_html

    tree = Element(
        "div",
        Paragraph("See ", Link("https://example.com", "the docs"), "."),
        class_name="tw-prose",
    )
    render_html(tree)
    # '<div class="tw-prose"><p>See <a href="https://example.com">the docs</a>.</p></div>'
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterator
from dataclasses import dataclass

from before.errors import MarkupError

_TAG_RE = re.compile(r"[a-z][a-z0-9]*")


def _coerce(children: tuple[Node | str, ...]) -> tuple[Node, ...]:
    """Wrap bare strings in ``Text`` so callers can write prose inline."""
    return tuple(Text(child) if isinstance(child, str) else child for child in children)


@dataclass(frozen=True, slots=True)
class Text:
    """A literal run of text. Escaped on serialization."""

    value: str


@dataclass(frozen=True, slots=True, init=False)
class Element:
    """A generic container element (``div``, ``section``, ``main``...).

    ``class_name`` is the only attribute: it is the styling hook the
    site's CSS targets.
    """

    tag: str
    children: tuple[Node, ...]
    class_name: str | None

    def __init__(self, tag: str, *children: Node | str, class_name: str | None = None) -> None:
        if not _TAG_RE.fullmatch(tag):
            raise MarkupError(f"Invalid element tag: {tag!r}")
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "children", _coerce(children))
        object.__setattr__(self, "class_name", class_name)


@dataclass(frozen=True, slots=True, init=False)
class Paragraph:
    children: tuple[Node, ...]

    def __init__(self, *children: Node | str) -> None:
        object.__setattr__(self, "children", _coerce(children))


@dataclass(frozen=True, slots=True, init=False)
class Heading:
    """A section heading, ``<h1>`` through ``<h6>``."""

    level: int
    children: tuple[Node, ...]

    def __init__(self, level: int, *children: Node | str) -> None:
        if not 1 <= level <= 6:
            raise MarkupError(f"Heading level must be 1-6, got {level}")
        object.__setattr__(self, "level", level)
        object.__setattr__(self, "children", _coerce(children))


@dataclass(frozen=True, slots=True, init=False)
class ListItem:
    children: tuple[Node, ...]

    def __init__(self, *children: Node | str) -> None:
        object.__setattr__(self, "children", _coerce(children))


@dataclass(frozen=True, slots=True, init=False)
class UnorderedList:
    """A bulleted list. Only ``ListItem`` children are allowed."""

    items: tuple[ListItem, ...]

    def __init__(self, *items: ListItem) -> None:
        for item in items:
            if not isinstance(item, ListItem):
                raise MarkupError(
                    f"UnorderedList items must be ListItem, got {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)


@dataclass(frozen=True, slots=True)
class Link:
    """A hyperlink. Destination and visible label are independent."""

    href: str
    label: str

    def __post_init__(self) -> None:
        if not self.href:
            raise MarkupError(f"Link {self.label!r} has an empty href")


@dataclass(frozen=True, slots=True, init=False)
class Strong:
    children: tuple[Node, ...]

    def __init__(self, *children: Node | str) -> None:
        object.__setattr__(self, "children", _coerce(children))


@dataclass(frozen=True, slots=True, init=False)
class Emphasis:
    children: tuple[Node, ...]

    def __init__(self, *children: Node | str) -> None:
        object.__setattr__(self, "children", _coerce(children))


type Node = Text | Element | Paragraph | Heading | UnorderedList | ListItem | Link | Strong | Emphasis

# Node kinds that flow inside a line of text rather than starting a new block
_INLINE = (Text, Link, Strong, Emphasis)


def children_of(node: Node) -> tuple[Node, ...]:
    """Return the direct children of *node* (empty for leaves)."""
    if isinstance(node, UnorderedList):
        return node.items
    if isinstance(node, (Text, Link)):
        return ()
    return node.children


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants, depth-first, in document order."""
    yield node
    for child in children_of(node):
        yield from walk(child)


# -- Serialization --


def render_html(node: Node) -> str:
    """Serialize a markup tree to an HTML fragment."""
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    if isinstance(node, Link):
        href = html.escape(node.href, quote=True)
        return f'<a href="{href}">{html.escape(node.label, quote=False)}</a>'

    inner = "".join(render_html(child) for child in children_of(node))

    if isinstance(node, Element):
        if node.class_name:
            cls = html.escape(node.class_name, quote=True)
            return f'<{node.tag} class="{cls}">{inner}</{node.tag}>'
        return f"<{node.tag}>{inner}</{node.tag}>"
    if isinstance(node, Heading):
        return f"<h{node.level}>{inner}</h{node.level}>"

    tag = _SIMPLE_TAGS[type(node)]
    return f"<{tag}>{inner}</{tag}>"


_SIMPLE_TAGS: dict[type, str] = {
    Paragraph: "p",
    UnorderedList: "ul",
    ListItem: "li",
    Strong: "strong",
    Emphasis: "em",
}


def _inline_text(node: Node) -> str:
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Link):
        return node.label
    return "".join(_inline_text(child) for child in children_of(node))


def _block_lines(node: Node) -> list[str]:
    if isinstance(node, _INLINE):
        return [_inline_text(node)]

    lines: list[str] = []
    run: list[str] = []
    for child in children_of(node):
        if isinstance(child, _INLINE):
            run.append(_inline_text(child))
            continue
        if run:
            lines.append("".join(run))
            run = []
        lines.extend(_block_lines(child))
    if run:
        lines.append("".join(run))
    return lines


def extract_text(node: Node) -> str:
    """Flatten a markup tree to plain text.

    Block-level nodes (containers, paragraphs, headings, list items)
    each start a new line; inline nodes are joined in place. Runs of
    whitespace collapse to a single space, as a browser would show them.
    """
    lines = (" ".join(line.split()) for line in _block_lines(node))
    return "\n".join(line for line in lines if line)
