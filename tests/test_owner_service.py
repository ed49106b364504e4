"""
tests.test_owner_service

Service-layer tests: uniqueness ordering, update semantics and the store-level
UNIQUE constraint backstop.
"""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from owner_registry.db.repositories.owners import OwnerRepo
from owner_registry.services.errors import OwnerConflict, OwnerNotFound
from owner_registry.services.owner_service import STORE_CONFLICT_MESSAGE, OwnerService


async def _never(_: str) -> bool:
    return False


@pytest.mark.asyncio
async def test_create_get_roundtrip(session: AsyncSession) -> None:
    svc = OwnerService(session=session)
    created = await svc.create(name="Carla Dona", email="carla@x.com", phone="31977776666")

    fetched = await svc.get(created.id)
    assert (fetched.id, fetched.name, fetched.email, fetched.phone) == (
        created.id,
        "Carla Dona",
        "carla@x.com",
        "31977776666",
    )


@pytest.mark.asyncio
async def test_create_reports_first_violated_field(session: AsyncSession) -> None:
    svc = OwnerService(session=session)
    await svc.create(name="Carla Dona", email="carla@x.com", phone="31977776666")

    with pytest.raises(OwnerConflict) as exc:
        await svc.create(name="Outra Pessoa", email="carla@x.com", phone="31977776666")
    assert exc.value.field == "email"

    with pytest.raises(OwnerConflict) as exc:
        await svc.create(name="Outra Pessoa", email="outra@x.com", phone="31977776666")
    assert exc.value.field == "phone"


@pytest.mark.asyncio
async def test_update_with_own_values_is_not_a_conflict(session: AsyncSession) -> None:
    svc = OwnerService(session=session)
    owner = await svc.create(name="Carla Dona", email="carla@x.com", phone="31977776666")

    updated = await svc.update(owner.id, name="Carla Dona", email="carla@x.com", phone="31977776666")
    assert updated.id == owner.id


@pytest.mark.asyncio
async def test_missing_ids_raise_not_found(session: AsyncSession) -> None:
    svc = OwnerService(session=session)

    with pytest.raises(OwnerNotFound):
        await svc.get(1)
    with pytest.raises(OwnerNotFound):
        await svc.delete(1)
    with pytest.raises(OwnerNotFound):
        await svc.update(1, name="Carla Dona", email="carla@x.com", phone="31977776666")


@pytest.mark.asyncio
async def test_store_constraint_catches_raced_duplicate(
    session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    svc = OwnerService(session=session)
    await svc.create(name="Carla Dona", email="carla@x.com", phone="31977776666")

    # Simulate a concurrent insert that passed the existence check before ours committed.
    monkeypatch.setattr(svc._owners, "exists_by_name", _never)

    with pytest.raises(OwnerConflict) as exc:
        await svc.create(name="Carla Dona", email="outra@x.com", phone="31900001111")
    assert exc.value.field is None
    assert exc.value.message == STORE_CONFLICT_MESSAGE

    # Session is usable again after the rollback.
    assert [o.name for o in await svc.list_all()] == ["Carla Dona"]


@pytest.mark.asyncio
async def test_repository_lookups(session: AsyncSession) -> None:
    repo = OwnerRepo(session)
    svc = OwnerService(session=session)
    owner = await svc.create(name="Carla Dona", email="carla@x.com", phone="31977776666")

    assert await repo.exists_by_name("Carla Dona")
    assert await repo.exists_by_email("carla@x.com")
    assert await repo.exists_by_phone("31977776666")
    assert not await repo.exists_by_name("Ninguém")
    assert (await repo.find_by_email("carla@x.com")).id == owner.id
    assert await repo.find_by_phone("00000000000") is None
    assert await repo.exists_by_id(owner.id)

    await repo.delete_by_id(owner.id)
    await session.commit()
    assert not await repo.exists_by_id(owner.id)
    assert await repo.find_all() == []
