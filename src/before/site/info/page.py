"""The Info page: what Before is, its rough edges, and where to get help."""

from before.markup import Element, Heading, Link, ListItem, Paragraph, Strong, UnorderedList
from before.pages.types import PageConfig

config = PageConfig(disable_client_script=True)

title = "Info"


def page() -> Element:
    return Element(
        "div",
        Element(
            "div",
            Paragraph(
                Strong("Before"),
                " is a tool for replaying archived Blaseball data developed by the Society for"
                " Internet Blaseball Research. It works by setting a browser cookie with a time"
                " offset. It serves your browser a (mostly) unmodified copy of the Blaseball"
                " frontend application from that time, then serves that application archived"
                " data by emulating the application backend.",
            ),
            Paragraph(
                "There are many imperfections to this system: there are data gaps in SIBR’s"
                " archives; and data for certain objects is sometimes not granular enough. This"
                " is most notably seen when a player is affected by a game event; clicking on the"
                " player will not show the change until usually about a minute later."
                " (Incinerations and Feedback swaps prior to Season 5 are also impacted by this.)",
            ),
            Paragraph(
                "Using Before for research and videos is welcomed; please cite before.sibr.dev,"
                " and don’t take our archives as the only word of truth, especially in early"
                " seasons.",
            ),
            Paragraph(
                "If you run into an issue with Before, you can ",
                Link("https://discord.sibr.dev", "join the SIBR Discord server"),
                " and ask in either #help-desk or #before. ",
                Link("https://github.com/iliana/before", "Before’s source code is available on GitHub"),
                ".",
            ),
            Heading(2, "Various tips"),
            UnorderedList(
                ListItem(
                    "You can flute to your favorite team to pin their games to the top of the"
                    " Watch Live tab. The most reliable way to do this is to jump to an Earlseason"
                    " (Days 1–27) in the Expansion Era, then click on a team and click"
                    " “Favorite Team”.",
                ),
            ),
            class_name=(
                "tw-prose tw-prose-lg tw-prose-invert tw-mx-auto"
                " prose-p:tw-text-white prose-li:tw-text-white"
            ),
        ),
        class_name="tw-container tw-py-4 lg:tw-py-6",
    )
