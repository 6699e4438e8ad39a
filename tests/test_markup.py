"""Tests for before.markup — node construction, serialization, text extraction."""

import pytest

from before.errors import MarkupError
from before.markup import (
    Element,
    Emphasis,
    Heading,
    Link,
    ListItem,
    Paragraph,
    Strong,
    Text,
    UnorderedList,
    extract_text,
    render_html,
    walk,
)


class TestConstruction:
    def test_strings_become_text_nodes(self) -> None:
        p = Paragraph("Hello ", Strong("world"))
        assert p.children == (Text("Hello "), Strong(Text("world")))

    def test_nodes_are_frozen(self) -> None:
        p = Paragraph("x")
        with pytest.raises(AttributeError):
            p.children = ()  # type: ignore[misc]

    def test_equal_trees_compare_equal(self) -> None:
        a = Element("div", Paragraph("a", Link("https://x.test", "x")), class_name="c")
        b = Element("div", Paragraph("a", Link("https://x.test", "x")), class_name="c")
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_out_of_range(self, level: int) -> None:
        with pytest.raises(MarkupError, match="1-6"):
            Heading(level, "Title")

    def test_link_requires_href(self) -> None:
        with pytest.raises(MarkupError, match="empty href"):
            Link("", "nowhere")

    @pytest.mark.parametrize("tag", ["", "Div", "my-tag", "div onclick", "div\n"])
    def test_invalid_element_tag(self, tag: str) -> None:
        with pytest.raises(MarkupError, match="Invalid element tag"):
            Element(tag)

    def test_list_only_accepts_list_items(self) -> None:
        with pytest.raises(MarkupError, match="ListItem"):
            UnorderedList(Paragraph("not an item"))  # type: ignore[arg-type]


class TestRenderHTML:
    def test_element_with_class(self) -> None:
        html = render_html(Element("div", "hi", class_name="tw-prose lg:tw-py-6"))
        assert html == '<div class="tw-prose lg:tw-py-6">hi</div>'

    def test_element_without_class(self) -> None:
        assert render_html(Element("section")) == "<section></section>"

    def test_block_and_inline_tags(self) -> None:
        tree = Element(
            "div",
            Heading(2, "Tips"),
            Paragraph(Strong("bold"), " and ", Emphasis("soft")),
            UnorderedList(ListItem("one"), ListItem("two")),
        )
        assert render_html(tree) == (
            "<div><h2>Tips</h2>"
            "<p><strong>bold</strong> and <em>soft</em></p>"
            "<ul><li>one</li><li>two</li></ul></div>"
        )

    def test_link_keeps_href_and_label_separate(self) -> None:
        html = render_html(Link("https://github.com/iliana/before", "source code"))
        assert html == '<a href="https://github.com/iliana/before">source code</a>'

    def test_text_is_escaped(self) -> None:
        assert render_html(Text("<b>&</b>")) == "&lt;b&gt;&amp;&lt;/b&gt;"

    def test_attributes_are_escaped(self) -> None:
        html = render_html(Link('https://x.test/?a=1&b="2"', "x"))
        assert 'href="https://x.test/?a=1&amp;b=&quot;2&quot;"' in html


class TestExtractText:
    def test_blocks_start_new_lines(self) -> None:
        tree = Element(
            "div",
            Paragraph("First ", Strong("para"), "."),
            Heading(2, "Tips"),
            UnorderedList(ListItem("Do ", Link("https://x.test", "this"))),
        )
        assert extract_text(tree) == "First para.\nTips\nDo this"

    def test_whitespace_collapses(self) -> None:
        assert extract_text(Paragraph("a   b\n  c")) == "a b c"

    def test_link_contributes_label_not_href(self) -> None:
        text = extract_text(Paragraph(Link("https://discord.sibr.dev", "the Discord")))
        assert text == "the Discord"

    def test_mixed_inline_and_block_children(self) -> None:
        tree = Element("div", "lead-in", Paragraph("body"), "tail")
        assert extract_text(tree) == "lead-in\nbody\ntail"


class TestWalk:
    def test_document_order(self) -> None:
        tree = Element("div", Paragraph("a"), UnorderedList(ListItem("b")))
        kinds = [type(node).__name__ for node in walk(tree)]
        assert kinds == ["Element", "Paragraph", "Text", "UnorderedList", "ListItem", "Text"]
