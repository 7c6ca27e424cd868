"""Interactive expression builder -- pick each field from presets.

Uses questionary for arrow-key selection, with a custom-value option per
field. The assembled expression is explained and previewed at the end.
"""

from __future__ import annotations

import sys
from datetime import datetime

import questionary
from questionary import Choice

from cli.banner import print_banner
from core.errors import CronError
from core.models.schedule import FIELD_NAMES
from scheduler.builder import PRESETS, build_expression
from scheduler.cron import parse_expression
from scheduler.describe import FIELD_LABELS, describe_schedule
from scheduler.presentation import resolve_zone, schedule_runs

# Questionary style
STYLE = questionary.Style([
    ("qmark", "fg:cyan bold"),
    ("question", "fg:white bold"),
    ("answer", "fg:green"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("instruction", "fg:gray italic"),
])

_CUSTOM = "__custom__"


def _abort() -> None:
    """User pressed Ctrl+C or cancelled."""
    print("\n  Builder cancelled.\n")
    sys.exit(0)


def _validate_custom(field_name: str):
    def validate(text: str) -> bool | str:
        try:
            build_expression(**{field_name: text})
        except CronError as e:
            return str(e)
        return True
    return validate


def _ask_field(field_name: str) -> str:
    label = FIELD_LABELS[field_name]
    choices = [
        Choice(title=f"{title}  ({value})", value=value)
        for value, title in PRESETS[field_name]
    ]
    choices.append(Choice(title="Custom value...", value=_CUSTOM))

    value = questionary.select(f"{label}:", choices=choices, style=STYLE).ask()
    if value is None:
        _abort()

    if value == _CUSTOM:
        value = questionary.text(
            f"{label} (e.g. 1-5, */10, 0,30):",
            validate=_validate_custom(field_name),
            style=STYLE,
        ).ask()
        if value is None:
            _abort()
    return value


def run_builder(zone: str | None = None, count: int = 5) -> str:
    """Walk through the five fields and return the built expression."""
    from cli.main import _fail

    try:
        resolve_zone(zone)
    except ValueError as e:
        _fail(str(e))

    print_banner()
    print("  Build a cron expression field by field.\n")

    values = {name: _ask_field(name) for name in FIELD_NAMES}
    expression = build_expression(**values)
    schedule = parse_expression(expression)

    print()
    print(f"  Expression:  {expression}")
    print(f"  Meaning:     {describe_schedule(schedule)}")
    print()
    for i, run in enumerate(schedule_runs(schedule, now=datetime.now(), count=count, zone=zone), 1):
        print(f"  {i:2d}. {run.formatted}  ({run.relative})")
    print()
    return expression
