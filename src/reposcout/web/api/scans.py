"""REST API for the scan console: query, start, tick and read state."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from reposcout.scanner.report import build_report
from reposcout.state import EXAMPLE_REPOS, ScoutState
from reposcout.web.app import cancel_ticker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scans"])


class QueryUpdate(BaseModel):
    text: str


@router.get("/state")
async def get_state(request: Request):
    return state_dict(request.app.state.scout)


@router.put("/query")
async def set_query(update: QueryUpdate, request: Request):
    scout: ScoutState = request.app.state.scout
    scout.on_query_change(update.text)
    return state_dict(scout)


@router.post("/scan", status_code=202)
async def start_scan(request: Request):
    app = request.app
    scout: ScoutState = app.state.scout
    if not scout.on_start_scan():
        return JSONResponse(status_code=422, content={"detail": scout.error})

    # The session already dropped its old timer; drop the old driver too
    cancel_ticker(app)
    interval = app.state.config.tick_interval
    if interval > 0:
        app.state.ticker = asyncio.create_task(_drive(scout, interval))
    return state_dict(scout)


@router.post("/tick")
async def tick(request: Request):
    scout: ScoutState = request.app.state.scout
    scout.on_tick()
    return state_dict(scout)


@router.get("/examples")
async def list_examples():
    return list(EXAMPLE_REPOS)


async def _drive(scout: ScoutState, interval: float) -> None:
    while scout.is_scanning:
        await asyncio.sleep(interval)
        scout.on_tick()
    logger.debug("Scan driver finished: %s", scout.status.value)


def state_dict(scout: ScoutState) -> dict:
    """Serialize everything a client needs to draw the console."""
    target = scout.session.target
    report = None
    if scout.analysis is not None and scout.assessment is not None:
        report = build_report(scout.analysis, scout.assessment)
    return {
        "status": scout.status.value,
        "progress": scout.progress,
        "phase": scout.phase_text,
        "query": scout.query,
        "error": scout.error,
        "target": target.full_name if target else None,
        "report": report,
    }
