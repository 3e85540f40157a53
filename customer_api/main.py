"""Customer API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CustomerApiError → {code, reason, description} envelope
    - CORS configured from settings (not hardcoded)
    - MongoDB client created on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Swagger UI served at /api-docs, OpenAPI document at /openapi.json
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_api.api.error_handlers import register_error_handlers
from customer_api.api.routes import customer, health, index
from customer_api.config import get_settings
from customer_api.infrastructure.database import close_db, init_db
from customer_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.mongodb_uri,
        settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    logger.info("Customer API started")
    yield
    close_db()
    logger.info("Customer API shutting down")


app = FastAPI(
    title="Customer API",
    version="0.1.0",
    docs_url="/api-docs",
    redoc_url=None,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(index.router)
app.include_router(health.router)
app.include_router(customer.router)

register_error_handlers(app)
