"""Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One InteractionController per process, built in the lifespan and stored on app.state
    - The product payload is loaded once, in the background, at startup
    - Shutdown cancels in-flight delays, drains log forwards, then closes the HTTP client
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import catalog, health
from catalog.config import Settings, get_settings
from catalog.infrastructure.latency import LatencySimulator
from catalog.infrastructure.observability import setup_logging
from catalog.infrastructure.product_source import HttpProductSource
from catalog.infrastructure.remote_logger import HttpLogSink, RemoteLogger
from catalog.services.interaction_controller import InteractionController

logger = logging.getLogger(__name__)


def build_controller(
    settings: Settings, client: httpx.AsyncClient,
) -> tuple[InteractionController, RemoteLogger]:
    """Wire the controller and its collaborators from settings."""
    events = RemoteLogger(HttpLogSink(client, settings.log_sink_url))
    source = HttpProductSource(client, settings.products_url, events)
    latency = LatencySimulator(
        settings.delay_min_ms,
        settings.delay_max_ms,
        settings.delay_fallback_ms,
        events=events,
    )
    return InteractionController(source, latency, events), events


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    controller, events = build_controller(settings, client)
    app.state.controller = controller
    app.state.events = events
    init_task = asyncio.create_task(controller.initialize())
    logger.info("Catalog API started")
    yield
    logger.info("Catalog API shutting down")
    init_task.cancel()
    await asyncio.gather(init_task, return_exceptions=True)
    await controller.close()
    await events.drain()
    await client.aclose()


app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)

register_error_handlers(app)
