"""Parse errors raised for invalid cron expressions.

Both kinds subclass ValueError, so callers that only care about "bad input"
can keep catching ValueError.
"""

from __future__ import annotations


class CronError(ValueError):
    """Base class for every error raised while parsing an expression."""

    kind = "cron"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"error": str(self), "kind": self.kind, "field": self.field}


class FormatError(CronError):
    """Structural problem: field count, non-numeric token, bad step."""

    kind = "format"


class RangeError(CronError):
    """A value outside the legal bounds of its field."""

    kind = "range"

    def __init__(self, message: str, field: str, min_value: int, max_value: int) -> None:
        super().__init__(message, field=field)
        self.min_value = min_value
        self.max_value = max_value

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["bounds"] = [self.min_value, self.max_value]
        return data
