import base64

import httpx
import pytest
import respx

from gittogether.api import (
    GRAPHQL_URL,
    AccountType,
    Contributor,
    ContributorStats,
    GitHubError,
    avatar_base64_for_user,
    avatar_for_user,
    build_query_variables,
    identicon_png,
    list_contributors_stats,
    response_to_contributor_stat,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _login(name):
    return {"login": name}


def _comments(*names):
    return {"edges": [{"node": {"author": _login(n)}} for n in names]}


def _commit(additions, deletions, login=None, name=None, parents=1):
    return {
        "node": {
            "additions": additions,
            "deletions": deletions,
            "parents": {"totalCount": parents},
            "author": {"name": name, "user": _login(login) if login else None},
        }
    }


def _response():
    return {
        "data": {
            "issues": {
                "edges": [
                    {
                        "node": {
                            "__typename": "Issue",
                            "author": _login("alice"),
                            "comments": _comments("bob"),
                        }
                    }
                ]
            },
            "prs": {
                "edges": [
                    {
                        "node": {
                            "__typename": "PullRequest",
                            "author": _login("bob"),
                            "comments": _comments("alice"),
                            "reviews": _comments("coveralls"),
                        }
                    }
                ]
            },
            "repository": {
                "defaultBranchRef": {
                    "target": {
                        "__typename": "Commit",
                        "history": {
                            "edges": [
                                _commit(40, 7, login="bob"),
                                _commit(3, 2, name="Local Dev"),
                                _commit(11, 4, login="bob"),
                                _commit(500, 500, login="alice", parents=2),
                                _commit(9, 9, login="actions-user"),
                            ]
                        },
                    }
                }
            },
        }
    }


def test_avatar_for_user():
    assert avatar_for_user("octocat") == "https://github.com/octocat.png"
    assert Contributor("octocat").avatar_url == avatar_for_user("octocat")


def test_get_or_create_returns_same_entry():
    stats = ContributorStats()
    first = stats.get_or_create("alice")
    assert stats.get_or_create("alice") is first
    assert first.account_type is AccountType.GITHUB


def test_get_or_create_from_author_by_login_and_name():
    stats = ContributorStats()
    gh = stats.get_or_create_from_author({"name": "Alice A", "user": _login("alice")})
    local = stats.get_or_create_from_author({"name": "Local Dev", "user": None})
    assert gh.author == "alice" and gh.account_type is AccountType.GITHUB
    assert local.author == "Local Dev" and local.account_type is AccountType.UNKNOWN
    assert set(stats.stats) == {"alice", "Local Dev"}


def test_get_or_create_from_author_without_identity():
    with pytest.raises(ValueError):
        ContributorStats().get_or_create_from_author({"name": None, "user": None})


def test_counters_accumulate():
    stats = ContributorStats()
    author = {"user": _login("alice")}
    stats.increase_addition(author, 10)
    stats.increase_deletion(author, 4)
    stats.increase_commit(author)
    stats.increase_issue("alice")
    stats.increase_pr("alice")
    stats.increase_comment("alice")
    alice = stats.stats["alice"]
    assert (alice.commit.addition, alice.commit.deletion, alice.commit.commit) == (10, 4, 1)
    assert (alice.issue.issue, alice.issue.pr, alice.issue.comment) == (1, 1, 1)


def test_response_aggregation():
    result = response_to_contributor_stat(_response())
    by_name = {c.author: c for c in result}
    assert set(by_name) == {"alice", "bob", "Local Dev"}
    assert by_name["alice"].issue.issue == 1
    assert by_name["alice"].issue.comment == 1
    assert by_name["alice"].commit.commit == 0  # merge commit skipped
    assert by_name["bob"].issue.pr == 1
    assert by_name["bob"].commit.commit == 2
    assert by_name["Local Dev"].account_type is AccountType.UNKNOWN
    assert by_name["Local Dev"].commit.addition == 3


def test_response_sorted_most_active_first():
    result = response_to_contributor_stat(_response())
    keys = [(c.commit.commit, c.commit.addition, c.commit.deletion) for c in result]
    assert keys == sorted(keys, reverse=True)
    assert result[0].author == "bob"


def test_response_drops_ignored_accounts():
    authors = sorted(c.author for c in response_to_contributor_stat(_response()))
    assert authors == ["Local Dev", "alice", "bob"]


def test_response_without_repository_fails():
    response = _response()
    response["data"]["repository"] = None
    with pytest.raises(ValueError):
        response_to_contributor_stat(response)


def test_build_query_variables():
    variables = build_query_variables("o", "r", "a", "b")
    assert variables["s1"] == "repo:o/r type:issue created:a..b"
    assert variables["s2"] == "repo:o/r type:pr created:a..b"
    assert (variables["owner"], variables["repo"]) == ("o", "r")
    assert (variables["start"], variables["end"]) == ("a", "b")


def test_identicon_is_deterministic_png():
    data = identicon_png("Local Dev")
    assert data.startswith(PNG_SIGNATURE)
    assert identicon_png("Local Dev") == data
    assert identicon_png("Other Dev") != data


@pytest.mark.asyncio
async def test_avatar_base64_unknown_uses_identicon():
    uri = await avatar_base64_for_user("Local Dev", AccountType.UNKNOWN)
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == identicon_png("Local Dev")


@pytest.mark.asyncio
async def test_avatar_base64_github_downloads():
    with respx.mock:
        respx.get("https://github.com/octocat.png").mock(
            return_value=httpx.Response(200, content=PNG_SIGNATURE + b"body")
        )
        async with httpx.AsyncClient() as client:
            uri = await Contributor("octocat").avatar_base64(client)
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == PNG_SIGNATURE + b"body"


@pytest.mark.asyncio
async def test_list_contributors_stats():
    with respx.mock:
        route = respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(200, json=_response()))
        async with httpx.AsyncClient() as client:
            result = await list_contributors_stats(client, "o", "r", "s", "e")
    assert route.called
    assert [c.author for c in result] == [c.author for c in response_to_contributor_stat(_response())]


@pytest.mark.asyncio
async def test_list_contributors_stats_graphql_error():
    with respx.mock:
        respx.post(GRAPHQL_URL).mock(
            return_value=httpx.Response(200, json={"data": None, "errors": [{"message": "bad"}]})
        )
        async with httpx.AsyncClient() as client:
            with pytest.raises(GitHubError):
                await list_contributors_stats(client, "o", "r", "s", "e")


@pytest.mark.asyncio
async def test_list_contributors_stats_http_error():
    with respx.mock:
        respx.post(GRAPHQL_URL).mock(return_value=httpx.Response(500))
        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError):
                await list_contributors_stats(client, "o", "r", "s", "e")