# gittogether

gittogether collects contributor activity for a GitHub repository over one or
more periods and draws it as an SVG image. Each contributor gets a card that
shows commits, additions, deletions, issues, pull requests and comments.

## Installation

```
pip install .
```

To run the tests, install the `test` extra: `pip install .[test]`.

## Authentication

The GitHub GraphQL API needs a token. Put it in the `GITHUB_TOKEN`
environment variable before you run anything. Without it, and without a token
passed to `process`, a `RuntimeError` is raised.

## Command line

```
gittogether OWNER/REPO [PERIODS] [-s STYLE]
```

- `OWNER/REPO`: the repository to report on, for example `octo/project`.
- `PERIODS`: optional. One or more periods separated by `;`, each written as
  `name/start/end` with RFC 3339 timestamps, for example
  `Week 1/2024-01-01T00:00:00Z/2024-01-08T00:00:00Z`. Without it the report
  covers the 30 days up to now, under the name "Recent One Month".
- `-s`, `--style`: `compact` (the default) puts five narrow cards in a row and
  shows numbers only. Any other value selects the full style, with three wider
  cards in a row and a label next to each number.

The image is written to `image.svg` in the current directory. A malformed
period or repository, or a missing token, is reported on standard error and the
command exits with status 1. A period whose query fails is logged and skipped;
periods without contributors are left out of the image.

## Library use

```python
import asyncio

from gittogether.core import process
from gittogether.period import parse_from_input

periods = parse_from_input("Week 1/2024-01-01T00:00:00Z/2024-01-08T00:00:00Z")
svg = asyncio.run(process("octo/project", periods, "full", token="token"))
with open("card.svg", "w", encoding="utf-8") as out:
    out.write(svg.to_string())
```

The main pieces:

- `gittogether.period`: `Period`, `parse_from_input`, `get_recent_one_month`.
- `gittogether.api`: `list_contributors_stats` queries GitHub with an
  `httpx.AsyncClient`; `response_to_contributor_stat` turns a GraphQL response
  into a sorted list of `Contributor` records.
- `gittogether.card`: `draw_svg` builds the SVG document; its `avatar_loader`
  argument replaces the default avatar download.
- `gittogether.styles`: `CompactStyle`, `FullStyle` and `get_style`.
- `gittogether.template`: `construct_table` renders contributors as an HTML
  table, three per row.
- `gittogether.handler`: the coroutine `handler(url, token=None)` reads the
  `repo`, and optionally `period` and `style`, query parameters of a request
  URL and returns a `HandlerResponse` holding the SVG, or a 404 when `repo` is
  missing.

Avatars of GitHub accounts are downloaded and embedded as PNG data URIs;
commit authors without a GitHub account get a generated identicon instead.

Commits by `actions-user`, `github-classroom[bot]` and `coveralls` are left
out, and merge commits are not counted. Contributors are ordered by commits,
then additions, then deletions, largest first.

## What it does not do

- It does not run a web server. `handler` only turns a URL into a response
  object; serving it is up to you.
- It does not page through results: each query reads at most the first 100
  issues, pull requests, comments, reviews and commits of a period.