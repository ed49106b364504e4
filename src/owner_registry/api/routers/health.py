"""
owner_registry.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the store answers and the owner table
  exists (i.e. migrations have run).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from owner_registry.api.deps import db_session
from owner_registry.db.models import Owner
from owner_registry.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str] | JSONResponse:
    try:
        await session.execute(select(Owner.id).limit(1))
    except DBAPIError as e:
        log.warning("not_ready", error=str(e.orig))
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, content={"status": "not_ready"}
        )
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# In prod (`env=prod`) tables are not auto-created, so /readyz stays 503 until
# `alembic upgrade head` has run.
