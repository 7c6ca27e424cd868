"""Lightweight aiohttp server -- cron explain/next-runs HTTP API.

Routes:
    GET  /health
    POST /cron/explain   {"expression": "...", "count": 10, "timezone": "UTC"}
    GET  /cron/next?expression=...&count=...&timezone=...
"""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from aiohttp import web

from core.errors import CronError
from scheduler.cron import parse_expression
from scheduler.describe import breakdown, describe_schedule
from scheduler.presentation import schedule_runs

if TYPE_CHECKING:
    from core.config import AppConfig
    from core.models.schedule import ParsedSchedule

logger = logging.getLogger(__name__)


def create_app(config: AppConfig) -> web.Application:
    """Create and configure the aiohttp application."""
    app = web.Application()

    app["config"] = config

    app.router.add_get("/health", handle_health)
    app.router.add_post("/cron/explain", handle_explain)
    app.router.add_get("/cron/next", handle_next_runs)

    return app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _BadRequest(Exception):
    def __init__(self, body: dict) -> None:
        super().__init__(body.get("error", "bad request"))
        self.body = body


def _resolve_count(config: AppConfig, raw: object) -> int:
    if raw is None or raw == "":
        return config.scheduler.default_count
    if isinstance(raw, bool):
        raise _BadRequest({"error": f"Invalid count: {raw!r}"})
    try:
        count = int(raw)
    except (TypeError, ValueError):
        raise _BadRequest({"error": f"Invalid count: {raw!r}"})
    if count < 0:
        raise _BadRequest({"error": "count must be >= 0"})
    return min(count, config.scheduler.max_count)


async def _runs_payload(
    config: AppConfig,
    schedule: ParsedSchedule,
    count: object,
    zone: str | None,
) -> list[dict]:
    resolved = _resolve_count(config, count)
    try:
        # The minute walk is CPU-bound; keep it off the event loop
        runs = await asyncio.to_thread(
            schedule_runs,
            schedule,
            now=datetime.now(timezone.utc),
            count=resolved,
            horizon_minutes=config.scheduler.horizon_minutes,
            zone=zone or config.scheduler.timezone,
        )
    except ValueError as e:
        raise _BadRequest({"error": str(e)})
    return [
        {"at": run.at.isoformat(), "formatted": run.formatted, "relative": run.relative}
        for run in runs
    ]


# ---------------------------------------------------------------------------
# Route handlers
# ---------------------------------------------------------------------------

async def handle_health(request: web.Request) -> web.Response:
    """GET /health -- health check."""
    return web.json_response({"status": "ok"})


async def handle_explain(request: web.Request) -> web.Response:
    """POST /cron/explain -- description, field breakdown and next runs.

    Body: {"expression": "0 9 * * 1-5", "count": 5, "timezone": "Europe/Berlin"}
    """
    config: AppConfig = request.app["config"]

    try:
        body = await request.json()
    except json.JSONDecodeError:
        return web.json_response({"error": "Invalid JSON"}, status=400)

    if not isinstance(body, dict) or not str(body.get("expression") or "").strip():
        return web.json_response({"error": "Missing required field: expression"}, status=400)

    expression = str(body["expression"])
    try:
        schedule = parse_expression(expression)
        runs = await _runs_payload(config, schedule, body.get("count"), body.get("timezone"))
    except CronError as e:
        logger.info("Rejected expression %r: %s", expression, e)
        return web.json_response(e.to_dict(), status=400)
    except _BadRequest as e:
        return web.json_response(e.body, status=400)

    return web.json_response({
        "expression": expression,
        "normalized": schedule.expression,
        "description": describe_schedule(schedule),
        "breakdown": [row.model_dump() for row in breakdown(schedule)],
        "next_runs": runs,
    })


async def handle_next_runs(request: web.Request) -> web.Response:
    """GET /cron/next -- upcoming runs only."""
    config: AppConfig = request.app["config"]

    expression = request.query.get("expression", "").strip()
    if not expression:
        return web.json_response({"error": "Missing required parameter: expression"}, status=400)

    try:
        runs = await _runs_payload(
            config,
            parse_expression(expression),
            request.query.get("count"),
            request.query.get("timezone"),
        )
    except CronError as e:
        logger.info("Rejected expression %r: %s", expression, e)
        return web.json_response(e.to_dict(), status=400)
    except _BadRequest as e:
        return web.json_response(e.body, status=400)

    return web.json_response({"expression": expression, "next_runs": runs})
