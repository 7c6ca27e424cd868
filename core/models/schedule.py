"""Schedule models -- the parsed, immutable form of a cron expression."""

from __future__ import annotations

from datetime import datetime
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

# Field order as written in an expression
FIELD_NAMES = ("minute", "hour", "day_of_month", "month", "day_of_week")

# Legal (min, max) per field, after normalization
FIELD_BOUNDS: dict[str, tuple[int, int]] = {
    "minute": (0, 59),
    "hour": (0, 23),
    "day_of_month": (1, 31),
    "month": (1, 12),
    "day_of_week": (0, 6),
}

# One year of minutes
DEFAULT_HORIZON_MINUTES = 525600


class FieldSpec(BaseModel):
    """One parsed field: its bounds and the values it matches.

    `values` is sorted ascending and never empty.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    min_value: int
    max_value: int
    values: tuple[int, ...]
    is_wildcard: bool = False

    def matches(self, value: int) -> bool:
        return value in self.values

    @property
    def is_restricted(self) -> bool:
        return not self.is_wildcard


class ParsedSchedule(BaseModel):
    """All five fields of one expression. Built by the parser, never mutated."""

    model_config = ConfigDict(frozen=True)

    expression: str
    minute: FieldSpec
    hour: FieldSpec
    day_of_month: FieldSpec
    month: FieldSpec
    day_of_week: FieldSpec

    def __getitem__(self, name: str) -> FieldSpec:
        if name not in FIELD_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def iter_fields(self) -> Iterator[FieldSpec]:
        """Yield the five fields in expression order."""
        for name in FIELD_NAMES:
            yield getattr(self, name)

    @property
    def tokens(self) -> list[str]:
        """Raw normalized token per field, in expression order."""
        return self.expression.split()


class RunQuery(BaseModel):
    """A request for the next `count` runs of a schedule after `start`."""

    model_config = ConfigDict(frozen=True)

    schedule: ParsedSchedule
    start: datetime
    count: int = Field(default=10, ge=0)
    horizon_minutes: int = Field(default=DEFAULT_HORIZON_MINUTES, ge=0)

    def run(self) -> list[datetime]:
        from scheduler.runs import next_runs  # local import to avoid circular

        return next_runs(
            self.schedule,
            self.start,
            count=self.count,
            horizon_minutes=self.horizon_minutes,
        )
