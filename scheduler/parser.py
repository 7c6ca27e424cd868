"""Field parser -- turns normalized cron fields into explicit value sets.

Supports per field: *, */N, N, N-M, N-M/S, N/S and comma lists of these.

Examples:
    parse_field("*/15", "minute").values  -> (0, 15, 30, 45)
    parse_field("0,7", "day_of_week")     -> (0,)   7 is Sunday too
"""

from __future__ import annotations

import logging
import re

from core.errors import FormatError, RangeError
from core.models.schedule import FIELD_BOUNDS, FIELD_NAMES, FieldSpec, ParsedSchedule

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^\d+$")

# Day of week accepts 7 on input (Sunday) and folds it to 0
_SUNDAY_ALIAS = 7


def _input_max(field_name: str) -> int:
    if field_name == "day_of_week":
        return _SUNDAY_ALIAS
    return FIELD_BOUNDS[field_name][1]


def _to_int(token: str, field_name: str, what: str) -> int:
    if not _INT_RE.match(token):
        raise FormatError(
            f'Invalid {what} "{token}" in field "{field_name}"',
            field=field_name,
        )
    return int(token)


def _fold(value: int, field_name: str) -> int:
    if field_name == "day_of_week" and value == _SUNDAY_ALIAS:
        return 0
    return value


def _expand(start: int, end: int, step: int, field_name: str) -> set[int]:
    """start..end by step, clipped to the field's input bounds, 7 folded."""
    low, _ = FIELD_BOUNDS[field_name]
    high = _input_max(field_name)
    return {
        _fold(v, field_name)
        for v in range(start, end + 1, step)
        if low <= v <= high
    }


def _parse_step(term: str, field_name: str) -> set[int]:
    base, sep, step_str = term.partition("/")
    if "/" in step_str:
        raise FormatError(f'Invalid step expression "{term}" in field "{field_name}"', field=field_name)

    step = _to_int(step_str, field_name, "step value")
    if step <= 0:
        raise FormatError(f'Invalid step value "{step_str}" in field "{field_name}"', field=field_name)

    low, _ = FIELD_BOUNDS[field_name]
    high = _input_max(field_name)

    if base == "*":
        start, end = low, high
    elif "-" in base:
        start, end = _parse_bounds(base, field_name)
    else:
        start, end = _to_int(base, field_name, "value"), high

    return _expand(start, end, step, field_name)


def _parse_bounds(term: str, field_name: str) -> tuple[int, int]:
    parts = term.split("-")
    if len(parts) != 2 or not _INT_RE.match(parts[0]) or not _INT_RE.match(parts[1]):
        raise FormatError(f'Invalid range "{term}" in field "{field_name}"', field=field_name)
    return int(parts[0]), int(parts[1])


def _parse_single(term: str, field_name: str) -> int:
    value = _fold(_to_int(term, field_name, "value"), field_name)
    low, high = FIELD_BOUNDS[field_name]
    if not low <= value <= high:
        shown_high = _input_max(field_name)
        raise RangeError(
            f'Value {value} out of range for field "{field_name}" ({low}-{shown_high})',
            field=field_name,
            min_value=low,
            max_value=shown_high,
        )
    return value


def parse_field(raw: str, field_name: str) -> FieldSpec:
    """Parse one field string into a FieldSpec.

    Raises:
        FormatError: malformed term, non-numeric bound, bad step.
        RangeError: a literal value outside the field's bounds, or a field
            that expands to no legal value at all.
    """
    if field_name not in FIELD_BOUNDS:
        raise KeyError(f"Unknown cron field: {field_name!r}")

    low, high = FIELD_BOUNDS[field_name]
    raw = raw.strip()

    if raw == "*":
        return FieldSpec(
            name=field_name,
            min_value=low,
            max_value=high,
            values=tuple(range(low, high + 1)),
            is_wildcard=True,
        )

    values: set[int] = set()
    for term in raw.split(","):
        if not term:
            raise FormatError(f'Empty value in field "{field_name}"', field=field_name)
        if "/" in term:
            values |= _parse_step(term, field_name)
        elif "-" in term:
            start, end = _parse_bounds(term, field_name)
            values |= _expand(start, end, 1, field_name)
        elif term == "*":
            values |= set(range(low, high + 1))
        else:
            values.add(_parse_single(term, field_name))

    if not values:
        shown_high = _input_max(field_name)
        raise RangeError(
            f'Field "{field_name}" matches no values in range ({low}-{shown_high}): "{raw}"',
            field=field_name,
            min_value=low,
            max_value=shown_high,
        )

    return FieldSpec(
        name=field_name,
        min_value=low,
        max_value=high,
        values=tuple(sorted(values)),
        is_wildcard=False,
    )


def parse_schedule(normalized: str) -> ParsedSchedule:
    """Parse a normalized five-field expression.

    Raises FormatError when the field count is wrong; any field error
    aborts the whole parse.
    """
    parts = normalized.split()
    if len(parts) != 5:
        raise FormatError(
            f"expected 5 fields, got {len(parts)}. "
            "Format: minute hour day-of-month month day-of-week"
        )

    try:
        fields = {name: parse_field(part, name) for name, part in zip(FIELD_NAMES, parts)}
    except (FormatError, RangeError) as e:
        logger.debug("Rejected cron expression %r: %s", normalized, e)
        raise

    return ParsedSchedule(expression=" ".join(parts), **fields)
