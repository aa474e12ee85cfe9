from urllib.parse import urlencode

import pytest
import respx

from gittogether.api import GRAPHQL_URL
from gittogether.handler import MISSING_REPO_MESSAGE, handler

PAYLOAD = {
    "data": {
        "issues": {"edges": []},
        "prs": {"edges": []},
        "repository": {
            "defaultBranchRef": {
                "target": {
                    "__typename": "Commit",
                    "history": {
                        "edges": [
                            {
                                "node": {
                                    "additions": 5,
                                    "deletions": 2,
                                    "parents": {"totalCount": 1},
                                    "author": {"name": "Alice", "user": {"login": "alice"}},
                                }
                            }
                        ]
                    },
                }
            }
        },
    }
}

PERIOD = "Sprint/2024-01-01T00:00:00Z/2024-02-01T00:00:00Z"


@pytest.fixture
def router():
    with respx.mock(assert_all_called=False) as mock:
        mock.post(GRAPHQL_URL).respond(json=PAYLOAD)
        mock.get("https://github.com/alice.png").respond(content=b"avatar-bytes")
        yield mock


def _url(**params):
    return "https://cards.example.com/api/handler?" + urlencode(params)


@pytest.mark.asyncio
async def test_missing_repo_is_not_found():
    response = await handler("https://cards.example.com/api/handler?period=x", "token")
    assert response.status == 404
    assert response.body == MISSING_REPO_MESSAGE
    assert response.headers["Content-Type"] == "application/text"


@pytest.mark.asyncio
async def test_repo_returns_svg(router):
    response = await handler(_url(repo="octo/hello", period=PERIOD), "token")
    assert response.status == 200
    assert response.headers["Content-Type"] == "image/svg+xml"
    assert response.headers["charset"] == "utf-8"
    assert response.body.startswith("<svg")
    assert "Sprint (2024-01-01-2024-02-01)" in response.body


@pytest.mark.asyncio
async def test_default_style_is_compact(router):
    response = await handler(_url(repo="octo/hello", period=PERIOD), "token")
    assert "Commit: " not in response.body
    assert "https://github.com/alice" in response.body


@pytest.mark.asyncio
async def test_full_style_labels_values(router):
    response = await handler(_url(repo="octo/hello", period=PERIOD, style="full"), "token")
    assert "Commit: 1" in response.body
    assert "Addition: 5" in response.body


@pytest.mark.asyncio
async def test_default_period_is_recent_month(router):
    response = await handler(_url(repo="octo/hello"), "token")
    assert response.status == 200
    assert "Recent One Month (" in response.body


@pytest.mark.asyncio
async def test_bad_period_raises():
    with pytest.raises(ValueError):
        await handler(_url(repo="octo/hello", period="broken"), "token")