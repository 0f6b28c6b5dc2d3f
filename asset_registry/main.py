"""Asset Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and registry runtime initialized on startup via lifespan
    - Runtime resumes after the last stored block before serving requests

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema auto-created for local SQLite runs; production uses alembic
      (create_schema_on_startup=false)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asset_registry.api.error_handlers import register_error_handlers
from asset_registry.api.routes import assets, health, owners, registry
from asset_registry.config import get_settings
from asset_registry.db.session import create_schema
from asset_registry.infrastructure.database import init_db
from asset_registry.infrastructure.observability import setup_logging
from asset_registry.services.registry_runtime import init_runtime

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.create_schema_on_startup:
        await create_schema(manager.engine)
    runtime = init_runtime(settings)
    async with manager.session() as db:
        await runtime.resume(db)
    logger.info(
        "Asset registry API started",
        extra={"block_number": runtime.chain.block_number},
    )
    yield
    await manager.dispose()
    logger.info("Asset registry API shutting down")


app = FastAPI(
    title="Asset Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(assets.router)
app.include_router(owners.router)
app.include_router(registry.router)

register_error_handlers(app)
