"""Run scheduler -- walks forward minute by minute to find matching instants.

The walk is bounded by `horizon_minutes`, so an unsatisfiable schedule
(e.g. "0 0 31 2 *") returns a short or empty list instead of looping.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from core.models.schedule import DEFAULT_HORIZON_MINUTES, ParsedSchedule

logger = logging.getLogger(__name__)

_ONE_MINUTE = timedelta(minutes=1)


def cron_weekday(dt: datetime) -> int:
    """Day of week with 0=Sunday, 6=Saturday."""
    return dt.isoweekday() % 7


def _day_rule(dom_restricted: bool, dow_restricted: bool, dom_hit: bool, dow_hit: bool) -> bool:
    # Both restricted: standard cron OR rule
    if dom_restricted and dow_restricted:
        return dom_hit or dow_hit
    if dom_restricted:
        return dom_hit
    if dow_restricted:
        return dow_hit
    return True


def schedule_matches(schedule: ParsedSchedule, dt: datetime) -> bool:
    """Check whether the wall-clock fields of `dt` satisfy the schedule."""
    return (
        dt.minute in schedule.minute.values
        and dt.hour in schedule.hour.values
        and dt.month in schedule.month.values
        and _day_rule(
            schedule.day_of_month.is_restricted,
            schedule.day_of_week.is_restricted,
            dt.day in schedule.day_of_month.values,
            cron_weekday(dt) in schedule.day_of_week.values,
        )
    )


def next_runs(
    schedule: ParsedSchedule,
    start: datetime,
    count: int = 10,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
) -> list[datetime]:
    """Return up to `count` instants after `start` that match the schedule.

    Args:
        schedule: Parsed schedule to evaluate.
        start: Exclusive lower bound. Naive datetimes are walked as
            wall-clock minutes; aware ones are walked in absolute minutes
            and read in their own zone. Wall times skipped by a DST gap
            never match; a repeated hour matches only its first pass.
        count: Maximum number of results.
        horizon_minutes: Maximum number of candidate minutes to examine.

    Returns:
        Strictly increasing list of matching instants, possibly empty.
    """
    runs: list[datetime] = []
    if count <= 0 or horizon_minutes <= 0:
        return runs

    minutes = frozenset(schedule.minute.values)
    hours = frozenset(schedule.hour.values)
    months = frozenset(schedule.month.values)
    days = frozenset(schedule.day_of_month.values)
    weekdays = frozenset(schedule.day_of_week.values)
    dom_restricted = schedule.day_of_month.is_restricted
    dow_restricted = schedule.day_of_week.is_restricted

    zone = start.tzinfo
    candidate = start.replace(second=0, microsecond=0) + _ONE_MINUTE
    if zone is not None:
        candidate = candidate.astimezone(timezone.utc)

    examined = 0
    latest_wall: datetime | None = None
    while examined < horizon_minutes:
        examined += 1
        local = candidate.astimezone(zone) if zone is not None else candidate
        candidate += _ONE_MINUTE

        if zone is not None:
            # A repeated wall-clock hour (DST fall-back) is only walked once
            wall = local.replace(tzinfo=None)
            if latest_wall is not None and wall <= latest_wall:
                continue
            latest_wall = wall

        if (
            local.minute in minutes
            and local.hour in hours
            and local.month in months
            and _day_rule(
                dom_restricted,
                dow_restricted,
                local.day in days,
                cron_weekday(local) in weekdays,
            )
        ):
            runs.append(local)
            if len(runs) >= count:
                break

    if len(runs) < count:
        logger.debug(
            "Horizon of %d minutes exhausted for %r with %d/%d runs",
            horizon_minutes, schedule.expression, len(runs), count,
        )
    return runs
