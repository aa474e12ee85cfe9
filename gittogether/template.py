"""HTML table of contributor statistics."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .api import Contributor
from .period import Period

COLUMNS = 3
_INDENT = "    "

Line = tuple[int, str]


def _stat_row(text: str, link: str | None, closing: str) -> Iterator[Line]:
    """One left-aligned statistic row of the detail table."""
    yield 5, "<tr>"
    yield 6, '<th align="left">'
    if link:
        yield 7, f'<a href="{link}">'
        yield 7, text
        yield 7, "</a>"
    else:
        yield 7, text
    yield 6, "</th>"
    yield 5, closing


def _avatar_column(contributor: Contributor) -> Iterator[Line]:
    login = contributor.author
    yield 3, "<th>"
    yield 4, "<table>"
    yield 5, "<tr>"
    yield 6, "<th>"
    yield 8, f'<img src="{contributor.avatar_url}" alt="1" width=100px height=100px>'
    yield 6, "</th>"
    yield 5, "</tr>"
    yield 5, "<tr>"
    yield 6, "<th>"
    yield 7, f'<a href="https://github.com/{login}">'
    yield 7, login
    yield 7, "</a>"
    yield 6, "</th>"
    yield 5, "</tr>"
    yield 4, "</table>"
    yield 3, "</th>"


def _detail_column(repo: str, contributor: Contributor, period: Period) -> Iterator[Line]:
    login, start, end = contributor.author, period.start, period.end
    base = f"https://github.com/{repo}"
    rows = [
        (
            f"Commit: {contributor.commit.commit}",
            f"{base}/commits?author={login}&since={start}&until={end}",
            "</tr>",
        ),
        (f"Addition: {contributor.commit.addition}", None, "</tr>"),
        (f"Deletion: {contributor.commit.deletion}", None, "<tr>"),
        (
            f"Issues: {contributor.issue.issue}",
            f"{base}/issues?q=author%3A{login}+type%3Aissue+created%3A{start}..{end}",
            "<tr>",
        ),
        (
            f"PRs: {contributor.issue.pr}",
            f"{base}/pulls?q=author%3A{login}+type%3Apr+created%3A{start}..{end}",
            "<tr>",
        ),
        (f"Comments: {contributor.issue.comment}", None, "<tr>"),
    ]
    yield 3, "<th>"
    yield 4, "<table>"
    for text, link, closing in rows:
        yield from _stat_row(text, link, closing)
    yield 4, "</table>"
    yield 3, "</th>"


def _cell_lines(repo: str, contributor: Contributor, period: Period) -> Iterator[Line]:
    yield 0, "<th>"
    yield 1, "<table>"
    yield 2, "<tr>"
    yield from _avatar_column(contributor)
    yield from _detail_column(repo, contributor, period)
    yield 2, "<tr>"
    yield 1, "</table>"
    yield 0, "</th>"


def _cell(repo: str, contributor: Contributor, period: Period) -> str:
    body = "\n".join(_INDENT * depth + text for depth, text in _cell_lines(repo, contributor, period))
    return f"\n{body}\n"


def construct_table(repo: str, stats: Sequence[Contributor], period: Period) -> str:
    """Render contributors as an HTML table, three cells per row."""
    rows = (
        "<tr>" + "".join(_cell(repo, c, period) for c in stats[i : i + COLUMNS]) + "</tr>"
        for i in range(0, len(stats), COLUMNS)
    )
    return "<table>" + "".join(rows) + "</table>"