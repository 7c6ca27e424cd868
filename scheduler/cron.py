"""Cron expression entry points.

Supports standard 5-field cron: minute hour day_of_month month day_of_week,
plus the @yearly/@monthly/@weekly/@daily/@hourly aliases and three-letter
month and day names.

Examples:
    "0 16 * * 1-5"   -> weekdays at 4pm
    "0 9 * * sun"    -> Sundays at 9am
    "*/5 * * * *"    -> every 5 minutes
    "0 9,17 * * *"   -> 9am and 5pm daily
"""

from __future__ import annotations

from datetime import datetime

from core.models.schedule import DEFAULT_HORIZON_MINUTES, ParsedSchedule
from scheduler.normalize import normalize_expression
from scheduler.parser import parse_schedule
from scheduler.runs import next_runs, schedule_matches


def parse_expression(expression: str) -> ParsedSchedule:
    """Normalize and parse a raw expression.

    Raises:
        FormatError, RangeError: the expression is invalid.
    """
    return parse_schedule(normalize_expression(expression))


def cron_matches(expression: str, dt: datetime) -> bool:
    """Check if a datetime matches a cron expression.

    Args:
        expression: 5-field cron string (minute hour dom month dow) or alias
        dt: datetime to check against, read as wall-clock time

    Returns:
        True if the datetime satisfies every field.
    """
    return schedule_matches(parse_expression(expression), dt)


def next_run(
    expression: str,
    after: datetime,
    horizon_minutes: int = DEFAULT_HORIZON_MINUTES,
) -> datetime | None:
    """First run strictly after `after`, or None if none within the horizon."""
    runs = next_runs(parse_expression(expression), after, count=1, horizon_minutes=horizon_minutes)
    return runs[0] if runs else None
