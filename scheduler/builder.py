"""Expression builder -- assemble an expression from per-field choices."""

from __future__ import annotations

from scheduler.cron import parse_expression

# Common choices offered per field: (value, label)
PRESETS: dict[str, list[tuple[str, str]]] = {
    "minute": [
        ("*", "Every minute"),
        ("0", "At minute 0"),
        ("*/5", "Every 5 minutes"),
        ("*/10", "Every 10 minutes"),
        ("*/15", "Every 15 minutes"),
        ("*/30", "Every 30 minutes"),
    ],
    "hour": [
        ("*", "Every hour"),
        ("0", "Midnight"),
        ("9", "9am"),
        ("12", "Noon"),
        ("*/2", "Every 2 hours"),
        ("*/6", "Every 6 hours"),
        ("9-17", "9am through 5pm"),
    ],
    "day_of_month": [
        ("*", "Every day"),
        ("1", "1st of the month"),
        ("15", "15th of the month"),
        ("1,15", "1st and 15th"),
    ],
    "month": [
        ("*", "Every month"),
        ("1", "January"),
        ("*/3", "Every quarter"),
        ("1-6", "January through June"),
    ],
    "day_of_week": [
        ("*", "Every day of the week"),
        ("1-5", "Weekdays"),
        ("0,6", "Weekends"),
        ("1", "Monday"),
        ("0", "Sunday"),
    ],
}


def build_expression(
    minute: str = "*",
    hour: str = "*",
    day_of_month: str = "*",
    month: str = "*",
    day_of_week: str = "*",
) -> str:
    """Join per-field values into an expression and validate it.

    Blank values fall back to "*"; whitespace inside a value is dropped
    so it cannot shift later fields.

    Raises:
        FormatError, RangeError: the assembled expression is invalid.
    """
    parts = [
        "".join((value or "").split()) or "*"
        for value in (minute, hour, day_of_month, month, day_of_week)
    ]
    expression = " ".join(parts)
    parse_expression(expression)
    return expression
