"""FastAPI application entry point.

Configures CORS, structured logging, the lifespan that owns the SQLite
handle, the catch-all 404, and router registration.  No request is served
before the database has been opened.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.sqlite import Database, DatabaseError
from app.routers import candidates, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: open the database, then serve; close on exit.

    A database that cannot be opened aborts startup, so uvicorn never binds
    the listening socket.
    """
    setup_logging()
    db = Database(settings.DATABASE_PATH)
    try:
        db.open()
    except DatabaseError as exc:
        logger.critical(
            "database_open_failed",
            extra={"db_path": settings.DATABASE_PATH, "error_message": str(exc)},
        )
        raise
    application.state.db = db
    logger.info("application_starting")
    yield
    db.close()
    logger.info("application_shutting_down")


app = FastAPI(
    title="Election API",
    description="CRUD API over election candidates and their parties",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Catch-all: unknown paths and unsupported methods are an empty 404
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/candidates", tags=["Candidates"])


def run() -> None:
    """Serve the app with uvicorn on ``settings.HOST:settings.PORT``."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
