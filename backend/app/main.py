"""GrubDash API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - CORS configured from settings (not hardcoded)
    - Stores initialized (and optionally seeded) on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import dishes, health, orders
from app.config import get_settings
from app.infrastructure.observability import setup_logging
from app.infrastructure.stores import init_stores

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_stores(seed=settings.seed_data)
    logger.info("GrubDash API started")
    yield
    logger.info("GrubDash API shutting down")


app = FastAPI(title="GrubDash API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dishes.router)
app.include_router(orders.router)

register_error_handlers(app)
