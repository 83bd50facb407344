"""Storefront API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every /api route passes through the authenticate dependency
    - Services built once in the lifespan and held on app.state.services
    - Global error handlers map StorefrontError kinds → envelope responses

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - database_auto_create mirrors a create-tables-on-boot workflow for local runs;
      deployments apply alembic migrations instead
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.dependencies import authenticate
from storefront.api.error_handlers import register_error_handlers
from storefront.api.routes import health
from storefront.api.routes.entity_router import build_entity_router
from storefront.config import get_settings
from storefront.infrastructure.database import init_db
from storefront.infrastructure.observability import setup_logging
from storefront.services.registry import CATEGORY, CUSTOMER, EMPLOYEE, PRODUCT, build_services

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
    if settings.database_auto_create:
        await manager.create_tables()
    app.state.services = build_services(manager)
    logger.info("Storefront API started")
    yield
    logger.info("Storefront API shutting down")
    await manager.close()


app = FastAPI(title="Storefront API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter(prefix="/api", dependencies=[Depends(authenticate)])
api_router.include_router(build_entity_router(CATEGORY))
api_router.include_router(build_entity_router(CUSTOMER))
api_router.include_router(build_entity_router(EMPLOYEE))
api_router.include_router(build_entity_router(PRODUCT))

app.include_router(health.router)
app.include_router(api_router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "storefront.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )
