"""Reporting periods: named time windows over which contributions are counted."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)

RECENT_ONE_MONTH = "Recent One Month"


@dataclass(frozen=True)
class Period:
    """A named window bounded by two RFC 3339 timestamps."""

    name: str
    start: str
    end: str


def parse_from_input(text: str) -> list[Period]:
    """Parse ``name/start/end`` entries separated by ``;``.

    Parts after the third ``/`` of an entry are ignored.
    """
    periods = []
    for entry in text.split(";"):
        logger.debug("period entry: %s", entry)
        parts = entry.split("/")[:3]
        if len(parts) < 3:
            raise ValueError(f"period {entry!r} is not of the form name/start/end")
        name, start, end = parts
        periods.append(Period(name=name, start=start, end=end))
    return periods


def _rfc3339_seconds(moment: datetime) -> str:
    return moment.replace(microsecond=0).strftime("%Y-%m-%dT%H:%M:%SZ")


def get_recent_one_month(now: datetime | None = None) -> list[Period]:
    """Return a single period covering the thirty days up to ``now`` (UTC)."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    start = _rfc3339_seconds(now - timedelta(days=30))
    end = _rfc3339_seconds(now)
    return [Period(name=RECENT_ONE_MONTH, start=start, end=end)]