from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from hostelcare.api import deps
from hostelcare.api.v1.router import router as api_router
from hostelcare.config.database import SessionLocal, engine, get_db_context
from hostelcare.config.logging import get_logger, setup_logging
from hostelcare.config.settings import settings
from hostelcare.core.error_handlers import register_exception_handlers
from hostelcare.core.middleware import register_middlewares
from hostelcare.db.init_db import ensure_default_admin, init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and the bootstrap admin outside production."""
    setup_logging()
    if settings.AUTO_CREATE_TABLES and not settings.is_production():
        init_db(engine)
    with get_db_context(SessionLocal) as db:
        ensure_default_admin(db)
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under settings.API_PREFIX.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    def health(db: Session = Depends(deps.get_db)) -> dict:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}

    return app


app = create_app()
