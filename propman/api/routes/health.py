"""Health check endpoints."""
from typing import Any

from fastapi import APIRouter, HTTPException

from propman.db.session import check_db_connection

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Database connectivity check. Returns 503 if the database is unreachable."""
    if not check_db_connection():
        raise HTTPException(
            status_code=503,
            detail={"status": "degraded", "db": "error"},
        )
    return {"status": "ok", "db": "ok"}
