"""HTTP handler that answers with the contributor card of a repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit

from .core import process
from .period import get_recent_one_month, parse_from_input

MISSING_REPO_MESSAGE = "Please provide repo and period to start"


@dataclass
class HandlerResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


async def handler(url: str, token: str | None = None) -> HandlerResponse:
    """Answer a request for ``url`` with an SVG, or 404 when no repo is given."""
    params = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))

    repo = params.get("repo")
    if repo is None:
        return HandlerResponse(
            status=404,
            headers={"Content-Type": "application/text"},
            body=MISSING_REPO_MESSAGE,
        )

    period_text = params.get("period")
    periods = parse_from_input(period_text) if period_text is not None else get_recent_one_month()
    style = params.get("style", "compact")

    svg = await process(repo, periods, style, token)
    return HandlerResponse(
        status=200,
        headers={"Content-Type": "image/svg+xml", "charset": "utf-8"},
        body=svg.to_string(),
    )