"""netpager API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NetPagerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers registered from api/error_handlers.py, not inlined here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from netpager.api.error_handlers import register_error_handlers
from netpager.api.routes import health, network_capture
from netpager.config import get_settings
from netpager.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("netpager API started")
    yield
    logger.info("netpager API shutting down")


app = FastAPI(title="netpager API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(network_capture.router)

register_error_handlers(app)
