from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stockwise.application.errors import InfrastructureError
from stockwise.application.interfaces.json_store import JsonStore
from stockwise.infrastructure.db.orm.kv_entry import KeyValueEntryORM


class SQLAlchemyJsonStore(JsonStore):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    async def load(self, key: str) -> str | None:
        async with self._session_factory() as session:
            stmt = select(KeyValueEntryORM.value).where(KeyValueEntryORM.key == key)
            res = await session.execute(stmt)
            return res.scalar_one_or_none()

    async def save(self, key: str, payload: str) -> None:
        async with self._session_factory() as session:
            try:
                orm = await session.get(KeyValueEntryORM, key)
                if orm is None:
                    session.add(KeyValueEntryORM(key=key, value=payload))
                else:
                    orm.value = payload
                    orm.updated_at = datetime.now(timezone.utc)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise InfrastructureError(f"Failed to write storage slot {key!r}") from exc
