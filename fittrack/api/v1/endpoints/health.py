"""Liveness and readiness probes."""

import logging
import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.db.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    """The process is up. built_at is echoed from BACKEND_BUILT_AT when the deploy sets it."""
    status: dict[str, str] = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        status["built_at"] = built_at
    return status


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """The process is up and the database answers a trivial query."""
    try:
        await db.scalar(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database not reachable from readiness probe")
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})
    return {"status": "ok", "database": "connected"}
