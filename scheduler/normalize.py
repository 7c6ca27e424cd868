"""Expression normalizer -- aliases and month/day names to numeric fields.

    normalize_expression("@daily")            -> "0 0 * * *"
    normalize_expression("0 9 * Jan-Mar MON") -> "0 9 * 1-3 1"
"""

from __future__ import annotations

import re

ALIASES = {
    "@yearly": "0 0 1 1 *",
    "@annually": "0 0 1 1 *",
    "@monthly": "0 0 1 * *",
    "@weekly": "0 0 * * 0",
    "@daily": "0 0 * * *",
    "@midnight": "0 0 * * *",
    "@hourly": "0 * * * *",
}

MONTH_ABBR = ("jan", "feb", "mar", "apr", "may", "jun",
              "jul", "aug", "sep", "oct", "nov", "dec")
DAY_ABBR = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

# 1-based months, 0-based days (0=Sunday)
_MONTH_NUMBERS = {name: str(i) for i, name in enumerate(MONTH_ABBR, start=1)}
_DAY_NUMBERS = {name: str(i) for i, name in enumerate(DAY_ABBR)}

_MONTH_RE = re.compile(r"\b(" + "|".join(MONTH_ABBR) + r")\b", re.IGNORECASE)
_DAY_RE = re.compile(r"\b(" + "|".join(DAY_ABBR) + r")\b", re.IGNORECASE)

_MONTH_INDEX = 3
_DAY_OF_WEEK_INDEX = 4


def normalize_expression(expr: str) -> str:
    """Lowercase, trim, expand aliases and substitute month/day names.

    Only a five-field input gets name substitution; anything else is
    returned with its whitespace collapsed so the parser can report the
    field count. Idempotent.
    """
    text = " ".join(str(expr).lower().split())

    alias = ALIASES.get(text)
    if alias is not None:
        return alias

    parts = text.split(" ")
    if len(parts) != 5:
        return text

    parts[_MONTH_INDEX] = _MONTH_RE.sub(
        lambda m: _MONTH_NUMBERS[m.group(1).lower()], parts[_MONTH_INDEX]
    )
    parts[_DAY_OF_WEEK_INDEX] = _DAY_RE.sub(
        lambda m: _DAY_NUMBERS[m.group(1).lower()], parts[_DAY_OF_WEEK_INDEX]
    )
    return " ".join(parts)
