"""Restaurantes API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiError -> JSON {"error", "code"} responses
    - CORS configured from settings (not hardcoded)
    - The query executor is created on startup and disposed on shutdown,
      never per request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurantes_api.api.error_handlers import register_error_handlers
from restaurantes_api.infrastructure.database import close_db, init_db
from restaurantes_api.infrastructure.observability import setup_logging
from restaurantes_api.config import get_settings
from restaurantes_api.api.routes import (
    health, restaurantes, productos, empleados, pedidos, reportes,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Restaurantes API started on port {settings.port}")
    yield
    await close_db()
    logger.info("Restaurantes API shut down")


app = FastAPI(
    title="Restaurantes API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(reportes.router)
app.include_router(restaurantes.router)
app.include_router(productos.router)
app.include_router(empleados.router)
app.include_router(pedidos.router)

register_error_handlers(app)
