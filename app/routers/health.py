"""Health check endpoint.

Returns service status including database connectivity.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from app.db.sqlite import Database, DatabaseError, get_database

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: Database = Depends(get_database)) -> Any:
    """Return 200 when ``SELECT 1`` succeeds on the handle, 503 otherwise."""
    db_status = "disconnected"

    try:
        if db.query_one("SELECT 1 AS ok") is not None:
            db_status = "connected"
    except DatabaseError:
        logger.warning("Health check: SQLite query failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
