"""Application entry point: ``uvicorn busbooking.main:app``."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from busbooking import __version__
from busbooking.api import api_v1_router
from busbooking.api.v1.middleware import base_error_handler, validation_exception_handler
from busbooking.core import BaseError, Settings, configure_logging, get_settings
from busbooking.infrastructure import RouteStore, create_engine
from busbooking.services import BookingService, CatalogService, ObserverRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around one shared store, registry and booking service."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        configure_logging(settings.LOG_LEVEL)
        engine = create_engine(settings)
        store = RouteStore(engine)
        if settings.SEED_ON_STARTUP:
            await store.initialize()
        
        registry = ObserverRegistry()
        app.state.store = store
        app.state.registry = registry
        app.state.catalog = CatalogService(store)
        app.state.booking = BookingService(store, registry)
        logger.info("Bus booking API ready (%s)", engine.url.render_as_string(hide_password=True))
        
        yield
        
        # Shutdown
        await engine.dispose()

    app = FastAPI(
        title="Bus Booking API",
        description="Route catalog and seat reservation",
        version=__version__,
        lifespan=lifespan
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Exception handling
    app.add_exception_handler(BaseError, base_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()
