"""Duration parsing helpers for configuration values."""

from __future__ import annotations

import re
from datetime import timedelta

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw])\s*$", re.IGNORECASE)
_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
    "w": 604800,
}


def parse_duration(value: str | int) -> timedelta:
    """Parse compact duration strings like '60s', '15m', '365d', '2w'.

    A bare integer is taken as minutes.
    """
    if isinstance(value, int):
        return timedelta(minutes=value)

    text = str(value or "").strip()
    if text.isdigit():
        return timedelta(minutes=int(text))

    match = _DURATION_RE.match(text)
    if not match:
        raise ValueError(f"Invalid duration: {value!r}. Expected '<int><s|m|h|d|w>'.")

    amount = int(match.group(1))
    unit = match.group(2).lower()
    return timedelta(seconds=amount * _UNIT_SECONDS[unit])


def duration_minutes(value: str | int) -> int:
    """Whole minutes in a duration string; partial minutes are dropped."""
    return int(parse_duration(value).total_seconds()) // 60
