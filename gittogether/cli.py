"""Command line entry point: write a contributor card for a repository."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from .core import process
from .period import get_recent_one_month, parse_from_input

OUTPUT_FILE = "image.svg"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gittogether",
        description="Draw an SVG card of the contributors of a GitHub repository.",
    )
    parser.add_argument("repo", help="repository as owner/name")
    parser.add_argument(
        "period",
        nargs="?",
        default=None,
        help="periods as name/start/end, separated by ';' (default: the last 30 days)",
    )
    parser.add_argument("-s", "--style", default="compact", help="card style (default: compact)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        periods = parse_from_input(args.period) if args.period else get_recent_one_month()
        svg = asyncio.run(process(args.repo, periods, args.style))
    except (ValueError, RuntimeError) as error:
        print(f"gittogether: {error}", file=sys.stderr)
        return 1
    Path(OUTPUT_FILE).write_text(svg.to_string(), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())