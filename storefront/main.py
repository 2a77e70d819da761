"""Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Exactly one CommerceStore per app, attached to app.state at construction

Design Decisions:
    - create_app() factory: tests build an isolated app around a fresh store
    - Store attached in the factory, not the lifespan, so it exists even when a
      test transport skips lifespan events
    - Logging configured in the lifespan: importing the module has no side effects
      on the root logger
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import health, products, variants, parties, orders
from storefront.config import Settings, get_settings
from storefront.core.store import CommerceStore
from storefront.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info("%s API started", settings.service_name)
    yield
    logger.info("%s API shutting down", settings.service_name)


def create_app(
    store: CommerceStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the API around one store (a fresh one unless given)."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Storefront API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else CommerceStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    prefix = settings.api_prefix
    app.include_router(health.router, prefix=prefix)
    app.include_router(products.router, prefix=prefix)
    app.include_router(variants.router, prefix=prefix)
    app.include_router(parties.customers_router, prefix=prefix)
    app.include_router(parties.sellers_router, prefix=prefix)
    app.include_router(orders.router, prefix=prefix)

    register_error_handlers(app)
    return app


app = create_app()
