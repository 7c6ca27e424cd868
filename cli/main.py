"""CronScope CLI -- the `cronscope` command.

Usage:
    cronscope explain "<expr>"          Describe an expression field by field
    cronscope next "<expr>" [-n 10]     Show upcoming runs
    cronscope build                     Interactive expression builder
    cronscope serve                     Start the HTTP API
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from datetime import datetime
from pathlib import Path

from core.config import HOME_ENV_VAR, AppConfig, load_config
from core.duration import duration_minutes
from core.errors import CronError


def _load(args: argparse.Namespace) -> AppConfig:
    if args.home:
        os.environ[HOME_ENV_VAR] = str(Path(args.home).expanduser())
    return load_config()


def _fail(message: str) -> None:
    print(f"  Error: {message}", file=sys.stderr)
    sys.exit(1)


def cmd_explain(args: argparse.Namespace) -> None:
    """Print the description and per-field breakdown."""
    from scheduler.cron import parse_expression
    from scheduler.describe import breakdown, describe_schedule

    try:
        schedule = parse_expression(args.expression)
    except CronError as e:
        _fail(str(e))

    print()
    print(f"  {schedule.expression}")
    print(f"  {describe_schedule(schedule)}")
    print()
    for row in breakdown(schedule):
        print(f"  {row.label:13s} {row.value:10s} {row.explanation}")
        print(f"  {'':13s} {'':10s} valid: {row.range}  values: {row.expanded}")
    print()


def cmd_next(args: argparse.Namespace) -> None:
    """Print upcoming runs."""
    from scheduler.presentation import upcoming_runs

    config = _load(args)
    count = config.scheduler.default_count if args.count is None else args.count
    zone = args.tz or config.scheduler.timezone

    try:
        horizon = duration_minutes(args.horizon) if args.horizon else config.scheduler.horizon_minutes
        runs = upcoming_runs(
            args.expression,
            now=datetime.now(),
            count=count,
            horizon_minutes=horizon,
            zone=zone,
        )
    except ValueError as e:
        _fail(str(e))

    print()
    if not runs:
        print("  No upcoming runs found within the search horizon.")
    for i, run in enumerate(runs, 1):
        print(f"  {i:2d}. {run.formatted}  ({run.relative})")
    print()


def cmd_build(args: argparse.Namespace) -> None:
    """Run the interactive builder."""
    from cli.builder import run_builder

    config = _load(args)
    run_builder(zone=args.tz or config.scheduler.timezone)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API."""
    from main import run, setup_logging

    if args.home:
        os.environ[HOME_ENV_VAR] = str(Path(args.home).expanduser())
    setup_logging("INFO")
    try:
        asyncio.run(run(config_path=args.config))
    except KeyboardInterrupt:
        pass


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cronscope",
        description="CronScope -- parse, explain and preview cron expressions",
    )
    parser.add_argument("--home", type=str, default=None, help="CronScope home directory")

    sub = parser.add_subparsers(dest="command")

    # explain
    explain = sub.add_parser("explain", help="Describe an expression")
    explain.add_argument("expression", type=str, help='Cron expression, e.g. "0 9 * * 1-5"')

    # next
    nxt = sub.add_parser("next", help="Show upcoming runs")
    nxt.add_argument("expression", type=str, help="Cron expression or @alias")
    nxt.add_argument("-n", "--count", type=int, default=None, help="Number of runs to show")
    nxt.add_argument("--tz", type=str, default=None, help='Zone label: "local", "UTC", "Europe/Berlin", "+05:30"')
    nxt.add_argument("--horizon", type=str, default=None, help='Search horizon, e.g. "365d"')

    # build
    build = sub.add_parser("build", help="Interactive expression builder")
    build.add_argument("--tz", type=str, default=None, help="Zone label for the preview")

    # serve
    serve = sub.add_parser("serve", help="Start the HTTP API")
    serve.add_argument("--config", "-c", type=str, default=None, help="Path to config.yaml")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    commands = {
        "explain": cmd_explain,
        "next": cmd_next,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        handler(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
