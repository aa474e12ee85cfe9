"""SVG cards summarising contributor activity per period."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from .api import AccountType, Contributor, avatar_base64_for_user
from .elements import Element, parse_path
from .period import Period
from .styles import Style

CARD_HEIGHT = 170
PERIOD_SPACING = 30
LINE_SPACING = 20

CSS = """
.header {
    font: 600 18px 'Segoe UI', Ubuntu, Sans-Serif;
    fill: #007A00;
    animation: fadeInAnimation 0.8s ease-in-out forwards;
}
.stat {
    font: 600 14px 'Segoe UI', Ubuntu, "Helvetica Neue", Sans-Serif; fill: #444;
}
.bold { font-weight: 700 }
.icon {
    fill: #003D00;
    display: block;
}
"""

AvatarLoader = Callable[[str, AccountType], Awaitable[str]]


def draw(source: str) -> Element:
    """Wrap the path described by ``source`` in an icon ``svg`` element."""
    path = Element("path", attributes=parse_path(source))
    return Element("svg").add(path).set("class", "icon")


def _small(icon: Element) -> Element:
    return icon.set("width", "15").set("height", "15").set("viewBox", "0 0 25 25")


def draw_plus() -> Element:
    return _small(draw('<path fill-rule="evenodd" d="M24 10h-10v-10h-4v10h-10v4h10v10h4v-10h10z"/>'))


def draw_minus() -> Element:
    return _small(draw('<path fill-rule="evenodd" d="M0 10h24v4h-24z"/>'))


def draw_pr() -> Element:
    return draw(
        '<path fill-rule="evenodd" d="M7.177 3.073L9.573.677A.25.25 0 0110 .854v4.792a.25.25 0 01-.427.177L7.177 3.427a.25.25 0 010-.354zM3.75 2.5a.75.75 0 100 1.5.75.75 0 000-1.5zm-2.25.75a2.25 2.25 0 113 2.122v5.256a2.251 2.251 0 11-1.5 0V5.372A2.25 2.25 0 011.5 3.25zM11 2.5h-1V4h1a1 1 0 011 1v5.628a2.251 2.251 0 101.5 0V5A2.5 2.5 0 0011 2.5zm1 10.25a.75.75 0 111.5 0 .75.75 0 01-1.5 0zM3.75 12a.75.75 0 100 1.5.75.75 0 000-1.5z"/>'
    )


def draw_commit() -> Element:
    return draw(
        '<path fill-rule="evenodd" d="M1.643 3.143L.427 1.927A.25.25 0 000 2.104V5.75c0 .138.112.25.25.25h3.646a.25.25 0 00.177-.427L2.715 4.215a6.5 6.5 0 11-1.18 4.458.75.75 0 10-1.493.154 8.001 8.001 0 101.6-5.684zM7.75 4a.75.75 0 01.75.75v2.992l2.028.812a.75.75 0 01-.557 1.392l-2.5-1A.75.75 0 017 8.25v-3.5A.75.75 0 017.75 4z"/>'
    )


def draw_issue() -> Element:
    return draw(
        '<path fill-rule="evenodd" d="M8 1.5a6.5 6.5 0 100 13 6.5 6.5 0 000-13zM0 8a8 8 0 1116 0A8 8 0 010 8zm9 3a1 1 0 11-2 0 1 1 0 012 0zm-.25-6.25a.75.75 0 00-1.5 0v3.5a.75.75 0 001.5 0v-3.5z"/>'
    )


def draw_discussion() -> Element:
    return draw(
        '<path fill-rule="evenodd" d="M1.75 1h8.5c.966 0 1.75.784 1.75 1.75v5.5A1.75 1.75 0 0 1 10.25 10H7.061l-2.574 2.573A1.458 1.458 0 0 1 2 11.543V10h-.25A1.75 1.75 0 0 1 0 8.25v-5.5C0 1.784.784 1 1.75 1ZM1.5 2.75v5.5c0 .138.112.25.25.25h1a.75.75 0 0 1 .75.75v2.19l2.72-2.72a.749.749 0 0 1 .53-.22h3.5a.25.25 0 0 0 .25-.25v-5.5a.25.25 0 0 0-.25-.25h-8.5a.25.25 0 0 0-.25.25Zm13 2a.25.25 0 0 0-.25-.25h-.5a.75.75 0 0 1 0-1.5h.5c.966 0 1.75.784 1.75 1.75v5.5A1.75 1.75 0 0 1 14.25 12H14v1.543a1.458 1.458 0 0 1-2.487 1.03L9.22 12.28a.749.749 0 0 1 .326-1.275.749.749 0 0 1 .734.215l2.22 2.22v-2.19a.75.75 0 0 1 .75-.75h1a.25.25 0 0 0 .25-.25Z" />'
    )


@dataclass
class CardDrawer:
    """Draws the card of one contributor for one period."""

    contributor: Contributor
    start: str
    end: str
    repo: str
    style: Style

    def create_detail(self) -> Element:
        """The column of contribution lines to the right of the avatar."""
        c = self.contributor
        base = f"https://github.com/{self.repo}"
        items = [
            (
                draw_commit(),
                "Commit",
                c.commit.commit,
                f"{base}/commits?author={c.author}&amp;since={self.start}&amp;until={self.end}",
            ),
            (draw_plus(), "Addition", c.commit.addition, ""),
            (draw_minus(), "Deletion", c.commit.deletion, ""),
            (
                draw_issue(),
                "Issue",
                c.issue.issue,
                f"{base}/issues?q=author%3A{c.author}+type%3Aissue+created%3A{self.start}..{self.end}",
            ),
            (
                draw_pr(),
                "PR",
                c.issue.pr,
                f"{base}/pulls?q=author%3A{c.author}+type%3Apr+created%3A{self.start}..{self.end}",
            ),
            (draw_discussion(), "Discussion", c.issue.comment, ""),
        ]
        detail = Element("g").set("transform", "translate(140, 25)")
        for row, (icon, info, value, link) in enumerate(items):
            detail.add(
                self.style.draw_contribution_item(icon, info, value, link).set(
                    "transform", f"translate(0, {row * LINE_SPACING})"
                )
            )
        return detail

    def contributor_info(self) -> Element:
        """Title, avatar and details of the contributor."""
        author = self.contributor.author
        title = self.style.draw_title(author, f"#{author}")
        return Element("g").add(title).add(self.create_detail())


def draw_period(
    stats: Sequence[Contributor], start: str, end: str, repo: str, style: Style
) -> tuple[Element, int]:
    """Lay out the cards of one period; return the group and its number of rows."""
    group = Element("g")
    per_row = style.user_per_row
    for offset, contributor in enumerate(stats):
        x, y = offset % per_row, offset // per_row
        card = CardDrawer(contributor, start, end, repo, style).contributor_info()
        group.add(
            card.set("transform", f"translate({style.card_width * x}, {CARD_HEIGHT * y})")
        )
    return group, -(-len(stats) // per_row)


async def draw_svg(
    data: Sequence[tuple[Period, Sequence[Contributor]]],
    repo: str,
    style: Style,
    avatar_loader: AvatarLoader | None = None,
) -> Element:
    """Build the whole SVG document for all periods with contributors."""
    if avatar_loader is None:
        avatar_loader = avatar_base64_for_user

    doc = Element("svg").set("xmlns", "http://www.w3.org/2000/svg")
    doc.add(
        Element("rect")
        .set("x", 0.5)
        .set("y", 0.5)
        .set("rx", 4.5)
        .set("height", "99.5%")
        .set("width", "99.5%")
        .set("fill", "#CCE4CC")
        .set("stroke", "#003D00")
    )

    authors = dict.fromkeys(
        (c.author, c.account_type) for _, contributors in data for c in contributors
    )
    defs = Element("defs")
    for author, account_type in authors:
        defs.add(
            Element("image")
            .set("id", author)
            .set("xlink:href", await avatar_loader(author, account_type))
            .set("height", "100")
            .set("width", "100")
        )
    doc.add(defs)

    height = PERIOD_SPACING
    for period, contributors in data:
        if not contributors:
            continue
        heading = f"{period.name} ({period.start[:10]}-{period.end[:10]})\n"
        title = (
            Element("g")
            .set("transform", "translate(25, 10)")
            .add(Element("text").add(heading).set("class", "header"))
        )
        cards, rows = draw_period(contributors, period.start, period.end, repo, style)
        cards.set("transform", "translate(0, 25)")
        doc.add(
            Element("g").set("transform", f"translate(0, {height})").add(title).add(cards)
        )
        height += rows * CARD_HEIGHT + PERIOD_SPACING

    return (
        doc.set("height", height)
        .set("width", style.card_width * style.user_per_row + 20)
        .set("xmlns:xlink", "http://www.w3.org/1999/xlink")
        .add(Element("style").add(CSS))
    )