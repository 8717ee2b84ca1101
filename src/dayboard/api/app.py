"""
DayBoard REST application.

``create_app`` wires settings, the store and the service into a FastAPI app.
The store handle is owned by the app's lifespan unless one that is already
connected is passed in.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dayboard import __version__
from dayboard.api.errors import install_error_handlers
from dayboard.api.responses import MessageResponse
from dayboard.api.routes import auth_router, day_records_router, tasks_router
from dayboard.service import DayBoardService
from dayboard.settings import Settings, get_settings
from dayboard.store import DayBoardStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: DayBoardStore | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment)
        store: Store handle; a new one is built from settings if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    store = store or DayBoardStore(settings.database_url, echo=settings.echo_sql)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Connect the store on startup and dispose it on shutdown."""
        owns_store = not store.is_connected
        logger.info("Starting DayBoard API %s", __version__)
        if owns_store:
            await store.connect()
        try:
            yield
        finally:
            if owns_store:
                await store.disconnect()
            logger.info("DayBoard API stopped")

    app = FastAPI(title="DayBoard API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.service = DayBoardService(store, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(day_records_router)

    @app.get("/", response_model=MessageResponse)
    async def root() -> MessageResponse:
        return MessageResponse(message="DayBoard API Server")

    return app
