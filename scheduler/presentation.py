"""Run presentation -- zone labels, display strings and relative times.

The engine itself returns plain datetimes; this module decides which zone
to evaluate a schedule in and how a run is shown to a person.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel

from core.models.schedule import DEFAULT_HORIZON_MINUTES, ParsedSchedule
from scheduler.cron import parse_expression
from scheduler.runs import next_runs

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

DISPLAY_FORMAT = "%a, %d %b %Y, %H:%M"


class RunDisplay(BaseModel):
    """A single upcoming run, ready to show."""

    at: datetime
    formatted: str
    relative: str


def resolve_zone(label: str | None) -> tzinfo | None:
    """Turn a zone label into a tzinfo.

    "local" (or empty) means the machine's local wall clock and returns
    None. Accepts "UTC", IANA names like "Europe/Berlin", and fixed
    offsets like "+05:30" or "-0800".

    Raises:
        ValueError: the label is not a known zone.
    """
    text = (label or "").strip()
    if not text or text.lower() == "local":
        return None
    if text.upper() in ("UTC", "Z"):
        return timezone.utc

    match = _OFFSET_RE.match(text)
    if match:
        sign = -1 if match.group(1) == "-" else 1
        offset = timedelta(hours=int(match.group(2)), minutes=int(match.group(3)))
        if offset >= timedelta(hours=24):
            raise ValueError(f"Invalid UTC offset: {label!r}")
        return timezone(sign * offset)

    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {label!r}") from e


def localize(now: datetime, zone: tzinfo | None) -> datetime:
    """Express `now` in the evaluation zone. None keeps naive local time."""
    if zone is None:
        if now.tzinfo is not None:
            return now.astimezone().replace(tzinfo=None)
        return now
    if now.tzinfo is None:
        now = now.astimezone()  # naive input is local time
    return now.astimezone(zone)


def _plural(amount: int, unit: str) -> str:
    return f"in {amount} {unit}{'' if amount == 1 else 's'}"


def relative_label(run: datetime, now: datetime) -> str:
    """'in 5 minutes', 'in 3 hours', 'in 2 days', 'in 6 weeks'."""
    seconds = (run - now).total_seconds()
    minutes = math.floor(seconds / 60)
    hours = math.floor(seconds / 3600)
    days = math.floor(seconds / 86400)

    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    return _plural(days // 7, "week")


def format_run(run: datetime, now: datetime) -> RunDisplay:
    """Display form of `run`; `now` must share its naive/aware kind."""
    return RunDisplay(
        at=run,
        formatted=run.strftime(DISPLAY_FORMAT),
        relative=relative_label(run, now),
    )


def upcoming_runs(
    expression: str,
    now: datetime | None = None,
    count: int = 10,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
    zone: str | None = None,
) -> list[RunDisplay]:
    """Parse `expression`, evaluate it in `zone` and format the next runs.

    Raises:
        FormatError, RangeError: invalid expression.
        ValueError: unknown zone label.
    """
    return schedule_runs(
        parse_expression(expression),
        now=now,
        count=count,
        horizon_minutes=horizon_minutes,
        zone=zone,
    )


def schedule_runs(
    schedule: ParsedSchedule,
    now: datetime | None = None,
    count: int = 10,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
    zone: str | None = None,
) -> list[RunDisplay]:
    """Like `upcoming_runs`, for an already parsed schedule."""
    tz = resolve_zone(zone)
    start = localize(now or datetime.now(timezone.utc), tz)

    runs = next_runs(schedule, start, count=count, horizon_minutes=horizon_minutes)
    if not runs:
        logger.info("No upcoming runs for %r within %d minutes", schedule.expression, horizon_minutes)
    return [format_run(run, start) for run in runs]
