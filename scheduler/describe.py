"""Description formatter -- renders a ParsedSchedule as an English sentence.

    "0 9 * * 1-5"   -> "At 09:00 on every weekday."
    "*/15 * * * *"  -> "At minutes 0, 15, 30, 45 of every hour."
    "0 0 15 * 1"    -> "At 00:00 on 15th and on Monday."
"""

from __future__ import annotations

from pydantic import BaseModel

from core.models.schedule import FIELD_BOUNDS, FieldSpec, ParsedSchedule

MONTH_NAMES = ("", "January", "February", "March", "April", "May", "June",
               "July", "August", "September", "October", "November", "December")
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

FIELD_LABELS = {
    "minute": "Minute",
    "hour": "Hour",
    "day_of_month": "Day of Month",
    "month": "Month",
    "day_of_week": "Day of Week",
}

_WILDCARD_PHRASES = {
    "minute": "every minute",
    "hour": "every hour",
    "day_of_month": "every day",
    "month": "every month",
    "day_of_week": "every day of the week",
}


class FieldBreakdown(BaseModel):
    """Per-field explanation row."""

    label: str
    value: str
    range: str
    explanation: str
    expanded: str


def is_consecutive(values: list[int] | tuple[int, ...]) -> bool:
    """True if there are at least two values and each is one more than the last."""
    if len(values) < 2:
        return False
    return all(b == a + 1 for a, b in zip(values, values[1:]))


def format_hour(hour: int) -> str:
    if hour == 0:
        return "12am (midnight)"
    if hour == 12:
        return "12pm (noon)"
    if hour < 12:
        return f"{hour}am"
    return f"{hour - 12}pm"


def format_time(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _value_label(field_name: str, value: int) -> str:
    if field_name == "minute":
        return f"{value:02d}"
    if field_name == "hour":
        return format_hour(value)
    if field_name == "day_of_month":
        return ordinal(value)
    if field_name == "month":
        return MONTH_NAMES[value]
    return DAY_NAMES[value]


def describe_field(spec: FieldSpec) -> str:
    """Short phrase for a single field, e.g. 'Monday through Friday'."""
    values = spec.values
    name = spec.name

    if spec.is_wildcard:
        return _WILDCARD_PHRASES[name]

    if len(values) == 1:
        return _value_label(name, values[0])

    if is_consecutive(values):
        if name == "minute":
            return f"minutes {values[0]}-{values[-1]}"
        return f"{_value_label(name, values[0])} through {_value_label(name, values[-1])}"

    if name == "minute":
        return "minutes " + ", ".join(str(v) for v in values)
    return ", ".join(_value_label(name, v) for v in values)


def _describe_time(minute: FieldSpec, hour: FieldSpec) -> str:
    if minute.is_wildcard:
        if hour.is_wildcard:
            return "Every minute"
        hours = hour.values
        if len(hours) == 1:
            return f"Every minute past hour {hours[0]}"
        if is_consecutive(hours):
            return f"Every minute from {format_hour(hours[0])} through {format_hour(hours[-1])}"
        return "Every minute past hours " + ", ".join(str(h) for h in hours)

    minutes = minute.values
    if hour.is_wildcard:
        if len(minutes) == 1:
            return f"At minute {minutes[0]} of every hour"
        return "At minutes " + ", ".join(str(m) for m in minutes) + " of every hour"

    if len(minutes) == 1:
        return "At " + ", ".join(format_time(h, minutes[0]) for h in hour.values)
    return (
        "At minute " + ", ".join(str(m) for m in minutes)
        + " past hour " + ", ".join(str(h) for h in hour.values)
    )


def _describe_days(dom: FieldSpec, dow: FieldSpec) -> str:
    if dom.is_restricted and dow.is_restricted:
        return f" on {describe_field(dom)} and on {describe_field(dow)}"
    if dom.is_restricted:
        return f" on the {describe_field(dom)}"
    if not dow.is_restricted:
        return ""

    days = dow.values
    if days == (1, 2, 3, 4, 5):
        return " on every weekday"
    if days == (0, 6):
        return " on weekends"
    if is_consecutive(days):
        return f" on every day-of-week from {DAY_NAMES[days[0]]} through {DAY_NAMES[days[-1]]}"
    return " on " + ", ".join(DAY_NAMES[d] for d in days)


def _describe_months(month: FieldSpec) -> str:
    if month.is_wildcard:
        return ""
    months = month.values
    if len(months) == 1:
        return f" in {MONTH_NAMES[months[0]]}"
    if is_consecutive(months):
        return f" from {MONTH_NAMES[months[0]]} through {MONTH_NAMES[months[-1]]}"
    return " in " + ", ".join(MONTH_NAMES[m] for m in months)


def describe_schedule(schedule: ParsedSchedule) -> str:
    """Human-readable sentence for a parsed schedule. Deterministic."""
    return (
        _describe_time(schedule.minute, schedule.hour)
        + _describe_days(schedule.day_of_month, schedule.day_of_week)
        + _describe_months(schedule.month)
        + "."
    )


def breakdown(schedule: ParsedSchedule) -> list[FieldBreakdown]:
    """One explanation row per field, in expression order."""
    rows: list[FieldBreakdown] = []
    for spec, token in zip(schedule.iter_fields(), schedule.tokens):
        label = FIELD_LABELS[spec.name]
        if spec.is_wildcard:
            explanation = f"Every {label.lower()}"
        else:
            explanation = describe_field(spec)
            if spec.name in ("minute", "hour"):
                explanation = explanation[:1].upper() + explanation[1:]

        low, high = FIELD_BOUNDS[spec.name]
        if spec.name == "day_of_week":
            high = 7

        rows.append(FieldBreakdown(
            label=label,
            value=token.upper(),
            range=f"{low}-{high}",
            explanation=explanation,
            expanded="*" if spec.is_wildcard else ", ".join(str(v) for v in spec.values),
        ))
    return rows
