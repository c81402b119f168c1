"""
Employee Records API - FastAPI application entry point.

Routes are registered explicitly; the /api database gate runs before routing
and the frontend catch-all is registered last so API routes take precedence.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.database import Database
from app.middleware.database_gate import add_database_gate
from app.middleware.error_handler import add_exception_handlers
from app.routers import employees, frontend, health
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    database: Database = app.state.database
    if not database.is_connected:
        await database.connect()
    logger.info("🚀 Employee Records API started")
    yield
    await database.close()
    logger.info("Employee Records API shutting down")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (read from the environment if omitted)
        database: Database handle to use (built from settings if omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    if database is None:
        database = Database(
            uri=settings.MONGO_URI,
            db_name=settings.DB_NAME,
            timeout_ms=settings.MONGO_TIMEOUT_MS
        )

    app = FastAPI(
        title="Employee Records API",
        description="CRUD service for employee records",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    add_exception_handlers(app)
    add_database_gate(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(employees.router, prefix="/api/employeelist", tags=["employees"])
    # Catch-all for the client bundle, must stay last
    app.include_router(frontend.router)

    return app


app = create_app()
