"""
owner_registry.db.repositories.owners

Repository for `Owner` entities.

Responsibilities:
- Existence and lookup queries by each unique field.
- Standard save/find/delete primitives by id.
"""

from __future__ import annotations

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from owner_registry.db.models import Owner


class OwnerRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _exists_where(self, column: InstrumentedAttribute[str], value: str) -> bool:
        stmt = select(exists().where(column == value))
        return bool((await self._session.execute(stmt)).scalar())

    async def _find_where(self, column: InstrumentedAttribute[str], value: str) -> Owner | None:
        stmt = select(Owner).where(column == value)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists_where(Owner.name, name)

    async def exists_by_email(self, email: str) -> bool:
        return await self._exists_where(Owner.email, email)

    async def exists_by_phone(self, phone: str) -> bool:
        return await self._exists_where(Owner.phone, phone)

    async def find_by_name(self, name: str) -> Owner | None:
        return await self._find_where(Owner.name, name)

    async def find_by_email(self, email: str) -> Owner | None:
        return await self._find_where(Owner.email, email)

    async def find_by_phone(self, phone: str) -> Owner | None:
        return await self._find_where(Owner.phone, phone)

    async def save(self, owner: Owner) -> Owner:
        # Covers both insert (new instance) and update (pending attribute changes).
        self._session.add(owner)
        await self._session.flush()
        return owner

    async def find_all(self) -> list[Owner]:
        stmt = select(Owner).order_by(Owner.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def find_by_id(self, owner_id: int) -> Owner | None:
        return await self._session.get(Owner, owner_id)

    async def exists_by_id(self, owner_id: int) -> bool:
        stmt = select(exists().where(Owner.id == owner_id))
        return bool((await self._session.execute(stmt)).scalar())

    async def delete_by_id(self, owner_id: int) -> None:
        await self._session.execute(delete(Owner).where(Owner.id == owner_id))
