"""FastAPI application factory for the RepoScout web API."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator

from fastapi import FastAPI

from reposcout import __version__
from reposcout.config import ScoutConfig
from reposcout.state import ScoutState


def create_app(
    config: ScoutConfig | None = None,
    state: ScoutState | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    The app holds exactly one ScoutState. With a positive tick interval an
    asyncio task drives the running scan; with ``tick_interval <= 0`` the
    client advances it through ``POST /api/tick``.
    """
    config = config or ScoutConfig.load()

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        cancel_ticker(app)

    app = FastAPI(
        title="RepoScout",
        version=__version__,
        docs_url="/api/docs",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.scout = state or ScoutState.from_config(config)
    app.state.ticker = None

    from reposcout.web.api.scans import router as scans_router

    app.include_router(scans_router, prefix="/api")

    return app


def cancel_ticker(app: FastAPI) -> None:
    """Cancel the task driving the previous scan, if any."""
    ticker: asyncio.Task | None = app.state.ticker
    if ticker is not None and not ticker.done():
        ticker.cancel()
    app.state.ticker = None
