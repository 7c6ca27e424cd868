"""Pydantic data models shared across all components."""

from core.models.schedule import (
    DEFAULT_HORIZON_MINUTES,
    FIELD_BOUNDS,
    FIELD_NAMES,
    FieldSpec,
    ParsedSchedule,
    RunQuery,
)

__all__ = [
    "DEFAULT_HORIZON_MINUTES",
    "FIELD_BOUNDS",
    "FIELD_NAMES",
    "FieldSpec",
    "ParsedSchedule",
    "RunQuery",
]
