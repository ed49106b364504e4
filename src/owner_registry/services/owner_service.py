"""
owner_registry.services.owner_service

Owner lifecycle service (transaction + persistence owner).

Responsibilities:
- Check name/email/phone uniqueness in a fixed order before writing.
- Create, list, fetch, update and delete owners.
- Commit on success; roll back and report a conflict when the store's UNIQUE
  constraints reject a write that raced past the checks.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from owner_registry.db.models import Owner
from owner_registry.db.repositories.owners import OwnerRepo
from owner_registry.observability.logging import get_logger
from owner_registry.services.errors import OwnerConflict, OwnerNotFound

log = get_logger(__name__)

# Messages returned to clients verbatim.
CREATE_CONFLICT_MESSAGES = {
    "name": "Já existe um proprietário com este nome.",
    "email": "Já existe um proprietário com este e-mail.",
    "phone": "Já existe um proprietário com este telefone.",
}
UPDATE_CONFLICT_MESSAGES = {
    "name": "Nome já está em uso por outro proprietário.",
    "email": "E-mail já está em uso por outro proprietário.",
    "phone": "Telefone já está em uso por outro proprietário.",
}
STORE_CONFLICT_MESSAGE = "Já existe um proprietário com estes dados."


class OwnerService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._owners = OwnerRepo(session)

    async def create(self, *, name: str, email: str, phone: str) -> Owner:
        checks = (
            ("name", self._owners.exists_by_name, name),
            ("email", self._owners.exists_by_email, email),
            ("phone", self._owners.exists_by_phone, phone),
        )
        for field, exists_by, value in checks:
            if await exists_by(value):
                log.info("owner_conflict", operation="create", field=field)
                raise OwnerConflict(field, CREATE_CONFLICT_MESSAGES[field])

        owner = Owner(name=name, email=email, phone=phone)
        await self._save(owner, operation="create")
        log.info("owner_created", owner_id=owner.id)
        return owner

    async def list_all(self) -> list[Owner]:
        return await self._owners.find_all()

    async def get(self, owner_id: int) -> Owner:
        owner = await self._owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFound(owner_id)
        return owner

    async def update(self, owner_id: int, *, name: str, email: str, phone: str) -> Owner:
        owner = await self._owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFound(owner_id)

        # A value already held by this same owner is not a conflict.
        checks = (
            ("name", self._owners.find_by_name, name),
            ("email", self._owners.find_by_email, email),
            ("phone", self._owners.find_by_phone, phone),
        )
        for field, find_by, value in checks:
            holder = await find_by(value)
            if holder is not None and holder.id != owner_id:
                log.info("owner_conflict", operation="update", field=field, owner_id=owner_id)
                raise OwnerConflict(field, UPDATE_CONFLICT_MESSAGES[field])

        owner.name = name
        owner.email = email
        owner.phone = phone
        await self._save(owner, operation="update")
        log.info("owner_updated", owner_id=owner.id)
        return owner

    async def delete(self, owner_id: int) -> None:
        if not await self._owners.exists_by_id(owner_id):
            raise OwnerNotFound(owner_id)
        await self._owners.delete_by_id(owner_id)
        await self._session.commit()
        log.info("owner_deleted", owner_id=owner_id)

    async def _save(self, owner: Owner, *, operation: str) -> None:
        try:
            await self._owners.save(owner)
            await self._session.commit()
        except IntegrityError as e:
            # Concurrent request won the race; the UNIQUE constraint is the backstop.
            await self._session.rollback()
            log.warning("owner_store_conflict", operation=operation, error=str(e.orig))
            raise OwnerConflict(None, STORE_CONFLICT_MESSAGE) from e


# --- Module Notes -----------------------------------------------------------
# Callers own the session; this service decides when to commit or roll back.
