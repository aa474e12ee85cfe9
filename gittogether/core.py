"""Gather contributor statistics for a repository and draw them as SVG."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import httpx

from .api import Contributor, GitHubError, list_contributors_stats
from .card import draw_svg
from .elements import Element
from .period import Period
from .styles import get_style
from .template import construct_table

logger = logging.getLogger(__name__)

TOKEN_VARIABLE = "GITHUB_TOKEN"


def split_repository(repository: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its owner and repository name.

    Anything after a second ``/`` is ignored.
    """
    parts = repository.split("/")
    if len(parts) < 2:
        raise ValueError(f"repository {repository!r} is not of the form owner/repo")
    return parts[0], parts[1]


def _section(repository: str, period: Period, stats: list[Contributor]) -> str:
    heading = f"## {period.name} ({period.start[:10]}-{period.end[:10]})\n"
    return heading + construct_table(repository, stats, period)


async def process(
    repository: str,
    periods: Iterable[Period],
    style: str = "compact",
    token: str | None = None,
) -> Element:
    """Fetch statistics for every period and draw the SVG document.

    The token defaults to the ``GITHUB_TOKEN`` environment variable. Periods
    whose query fails are reported and skipped; periods without contributors
    are left out.
    """
    if token is None:
        token = os.environ.get(TOKEN_VARIABLE)
        if token is None:
            raise RuntimeError(f"{TOKEN_VARIABLE} is not set")
    owner, repo = split_repository(repository)

    data: list[tuple[Period, list[Contributor]]] = []
    sections: list[str] = []
    headers = {"Authorization": f"Bearer {token}", "User-Agent": "gittogether"}
    async with httpx.AsyncClient(headers=headers) as client:
        for period in periods:
            try:
                stats = await list_contributors_stats(
                    client, owner, repo, period.start, period.end
                )
            except (httpx.HTTPError, GitHubError) as error:
                logger.error("Error: %s", error)
                continue
            if stats:
                sections.append(_section(repository, period, stats))
                data.append((period, stats))

    logger.debug("".join(sections))
    return await draw_svg(data, repository, get_style(style))