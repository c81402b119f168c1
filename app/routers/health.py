"""
Health router.
"""
from fastapi import APIRouter, Depends
from typing import Dict

from app.api.deps import get_database
from app.database import Database

router = APIRouter()


@router.get("/health")
async def health(database: Database = Depends(get_database)) -> Dict[str, str]:
    """Service liveness and the connectivity flag of the store."""
    return {
        "status": "healthy",
        "database": "connected" if database.is_connected else "disconnected"
    }
