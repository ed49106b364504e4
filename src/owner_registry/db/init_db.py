"""
owner_registry.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create the `proprietario` table for local development and tests.
- Keep the production schema workflow in Alembic (`alembic/versions`).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from owner_registry.db import models  # noqa: F401  # registers tables on Base.metadata
from owner_registry.db.base import Base
from owner_registry.observability.logging import get_logger

log = get_logger(__name__)


async def init_db(engine: AsyncEngine) -> None:
    """
    Create missing tables; existing tables are left untouched (no ALTERs), so a
    schema change on a dev database still needs a migration or a fresh file.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("tables_ready", tables=sorted(Base.metadata.tables))


# --- Module Notes -----------------------------------------------------------
# `tests/test_migrations.py` checks that this path and `alembic upgrade head`
# produce the same table.
