"""Contribution statistics gathered from the GitHub GraphQL API."""

from __future__ import annotations

import base64
import enum
import hashlib
import io
import itertools
from dataclasses import dataclass, field
from typing import Any

import httpx
from PIL import Image, ImageDraw

GRAPHQL_URL = "https://api.github.com/graphql"

IGNORED_ACCOUNTS = ("actions-user", "github-classroom[bot]", "coveralls")

CONTRIBUTOR_STATS_QUERY = """
query ContributorStatsQuery(
  $owner: String!, $repo: String!,
  $start: GitTimestamp!, $end: GitTimestamp!,
  $s1: String!, $s2: String!
) {
  issues: search(query: $s1, type: ISSUE, first: 100) {
    edges {
      node {
        __typename
        ... on Issue {
          author { login }
          comments(first: 100) { edges { node { author { login } } } }
        }
      }
    }
  }
  prs: search(query: $s2, type: ISSUE, first: 100) {
    edges {
      node {
        __typename
        ... on PullRequest {
          author { login }
          comments(first: 100) { edges { node { author { login } } } }
          reviews(first: 100) { edges { node { author { login } } } }
        }
      }
    }
  }
  repository(owner: $owner, name: $repo) {
    defaultBranchRef {
      target {
        __typename
        ... on Commit {
          history(since: $start, until: $end, first: 100) {
            edges {
              node {
                additions
                deletions
                parents { totalCount }
                author { name user { login } }
              }
            }
          }
        }
      }
    }
  }
}
"""

_PNG_PREFIX = "data:image/png;base64,"

_IDENTICON_CELL = 50
_IDENTICON_BORDER = 25
_IDENTICON_BACKGROUND = (240, 240, 240)


class GitHubError(Exception):
    """The GitHub API answered without usable data."""


@dataclass
class CommitContribution:
    addition: int = 0
    deletion: int = 0
    commit: int = 0


@dataclass
class IssueContribution:
    pr: int = 0
    issue: int = 0
    comment: int = 0


class AccountType(enum.Enum):
    GITHUB = "github"
    UNKNOWN = "unknown"


@dataclass
class Contributor:
    author: str
    commit: CommitContribution = field(default_factory=CommitContribution)
    issue: IssueContribution = field(default_factory=IssueContribution)
    account_type: AccountType = AccountType.GITHUB

    @property
    def avatar_url(self) -> str:
        return avatar_for_user(self.author)

    async def avatar_base64(self, client: httpx.AsyncClient | None = None) -> str:
        return await avatar_base64_for_user(self.author, self.account_type, client)


def avatar_for_user(user: str) -> str:
    """URL of the GitHub avatar of ``user``."""
    return f"https://github.com/{user}.png"


def identicon_png(user: str) -> bytes:
    """Render a deterministic 5x5 symmetric identicon for ``user`` as PNG."""
    digest = hashlib.sha512(user.encode("utf-8")).digest()
    colour = tuple(digest[:3])
    cell, border = _IDENTICON_CELL, _IDENTICON_BORDER
    size = 5 * cell + 2 * border
    image = Image.new("RGB", (size, size), _IDENTICON_BACKGROUND)
    painter = ImageDraw.Draw(image)
    bits = iter(digest[3:])
    for row, col in itertools.product(range(5), range(3)):
        if next(bits) % 2:
            continue
        for column in {col, 4 - col}:
            x0 = border + column * cell
            y0 = border + row * cell
            painter.rectangle((x0, y0, x0 + cell - 1, y0 + cell - 1), fill=colour)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


async def avatar_base64_for_user(
    user: str,
    account_type: AccountType,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Avatar of ``user`` as a PNG data URI.

    GitHub accounts use their avatar; other authors get an identicon.
    """
    if account_type is AccountType.GITHUB:
        if client is None:
            async with httpx.AsyncClient(follow_redirects=True) as own_client:
                response = await own_client.get(avatar_for_user(user))
        else:
            response = await client.get(avatar_for_user(user), follow_redirects=True)
        data = response.content
    else:
        data = identicon_png(user)
    return _PNG_PREFIX + base64.b64encode(data).decode("ascii")


@dataclass
class ContributorStats:
    """Per-author counters keyed by login or author name."""

    stats: dict[str, Contributor] = field(default_factory=dict)

    def increase_addition(self, author: dict[str, Any], count: int) -> None:
        self.get_or_create_from_author(author).commit.addition += count

    def increase_deletion(self, author: dict[str, Any], count: int) -> None:
        self.get_or_create_from_author(author).commit.deletion += count

    def increase_commit(self, author: dict[str, Any]) -> None:
        self.get_or_create_from_author(author).commit.commit += 1

    def increase_issue(self, user: str) -> None:
        self.get_or_create(user).issue.issue += 1

    def increase_pr(self, user: str) -> None:
        self.get_or_create(user).issue.pr += 1

    def increase_comment(self, user: str) -> None:
        self.get_or_create(user).issue.comment += 1

    def get_or_create_from_author(self, author: dict[str, Any]) -> Contributor:
        """Entry for a commit author: by GitHub login, else by git name."""
        user = author.get("user")
        if user:
            return self.get_or_create(user["login"])
        name = author.get("name")
        if name is None:
            raise ValueError("commit author has neither a GitHub user nor a name")
        if name not in self.stats:
            self.stats[name] = Contributor(name, account_type=AccountType.UNKNOWN)
        return self.stats[name]

    def get_or_create(self, user: str) -> Contributor:
        if user not in self.stats:
            self.stats[user] = Contributor(user, account_type=AccountType.GITHUB)
        return self.stats[user]


def _required(value: Any, what: str) -> Any:
    if value is None:
        raise ValueError(f"response is missing {what}")
    return value


def _edge_nodes(connection: dict[str, Any], what: str):
    for edge in _required(connection.get("edges"), f"{what} edges"):
        yield _required(_required(edge, f"{what} edge").get("node"), f"{what} node")


def _count_comments(result: ContributorStats, connection: dict[str, Any], what: str) -> None:
    for comment in _edge_nodes(connection, what):
        if comment.get("author"):
            result.increase_comment(comment["author"]["login"])


def response_to_contributor_stat(response: dict[str, Any]) -> list[Contributor]:
    """Aggregate a GraphQL response into contributors, most active first."""
    data = _required(response.get("data"), "data")
    result = ContributorStats()

    for node in _edge_nodes(_required(data.get("issues"), "issues"), "issue"):
        if node.get("__typename", "Issue") != "Issue":
            continue
        if node.get("author"):
            result.increase_issue(node["author"]["login"])
        _count_comments(result, _required(node.get("comments"), "comments"), "comment")

    for node in _edge_nodes(_required(data.get("prs"), "prs"), "pull request"):
        if node.get("__typename", "PullRequest") != "PullRequest":
            continue
        if node.get("author"):
            result.increase_pr(node["author"]["login"])
        _count_comments(result, _required(node.get("comments"), "comments"), "comment")
        if node.get("reviews"):
            _count_comments(result, node["reviews"], "review")

    repository = _required(data.get("repository"), "repository")
    branch = _required(repository.get("defaultBranchRef"), "default branch")
    target = branch.get("target")
    if target and target.get("__typename", "Commit") == "Commit":
        for edge in _required(target["history"].get("edges"), "history edges"):
            commit = _required(edge, "history edge").get("node")
            if commit is None:
                continue
            if commit["parents"]["totalCount"] > 1:
                continue  # merge commit
            author = commit.get("author")
            if author:
                result.increase_addition(author, commit["additions"])
                result.increase_deletion(author, commit["deletions"])
                result.increase_commit(author)

    for account in IGNORED_ACCOUNTS:
        result.stats.pop(account, None)

    return sorted(
        result.stats.values(),
        key=lambda c: (c.commit.commit, c.commit.addition, c.commit.deletion),
        reverse=True,
    )


def build_query_variables(owner: str, repo: str, start: str, end: str) -> dict[str, str]:
    """Variables for the contributor statistics query."""
    return {
        "owner": owner,
        "repo": repo,
        "start": start,
        "end": end,
        "s1": f"repo:{owner}/{repo} type:issue created:{start}..{end}",
        "s2": f"repo:{owner}/{repo} type:pr created:{start}..{end}",
    }


async def list_contributors_stats(
    client: httpx.AsyncClient, owner: str, repo: str, start: str, end: str
) -> list[Contributor]:
    """Query GitHub for the contributors of ``owner/repo`` between two timestamps."""
    response = await client.post(
        GRAPHQL_URL,
        json={
            "query": CONTRIBUTOR_STATS_QUERY,
            "variables": build_query_variables(owner, repo, start, end),
        },
    )
    response.raise_for_status()
    payload = response.json()
    if payload.get("data") is None:
        raise GitHubError(str(payload.get("errors", "no data in response")))
    return response_to_contributor_stat(payload)