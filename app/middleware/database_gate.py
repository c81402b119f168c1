"""
Database gate for the /api prefix.
Every /api request is rejected with 503 while the store is not connected,
before routing and without touching the database.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


def add_database_gate(app: FastAPI) -> None:
    """
    Register the connectivity check middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def check_database_connection(request: Request, call_next):
        if is_api_path(request.url.path):
            database = request.app.state.database
            if not database.is_connected:
                logger.warning(f"Rejected {request.method} {request.url.path}: database not connected")
                return JSONResponse(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    content={
                        "error": "ServiceUnavailableError",
                        "message": "Database not connected",
                        "details": {
                            "hint": "Please check your MongoDB connection and try again"
                        }
                    }
                )
        return await call_next(request)
