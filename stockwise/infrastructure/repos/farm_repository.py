from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from typing import TypeVar

from stockwise.application.errors import ConflictError, InfrastructureError, NotFound
from stockwise.application.interfaces.json_store import JsonStore
from stockwise.domain.models.activity_log import ActivityLog
from stockwise.domain.models.identifiers import new_id
from stockwise.domain.models.important_date import ImportantDate
from stockwise.domain.models.livestock import Livestock, LivestockCategory
from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.storage.defaults import default_livestock, default_pens
from stockwise.infrastructure.storage.documents import (
    dump_livestock,
    dump_pens,
    parse_livestock,
    parse_pens,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FarmRepository:
    """Authoritative in-memory copy of the livestock and pen collections.

    Every mutation goes through this object. The affected collection is
    rebuilt, written in full to the backing ``JsonStore``, and only swapped
    in once the write succeeded, so a failed write leaves memory untouched.
    """

    def __init__(
        self,
        store: JsonStore,
        *,
        livestock_key: str = "stockwiseLivestock",
        pens_key: str = "stockwisePens",
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._store = store
        self._livestock_key = livestock_key
        self._pens_key = pens_key
        self._id_factory = id_factory
        self._livestock: list[Livestock] = []
        self._pens: list[Pen] = []
        # Held from building a new collection until it is swapped in
        self._write_lock = asyncio.Lock()
        self._loaded = False

    # ------------------------------------------------------------------ loading

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        self._pens = await self._load_slot(self._pens_key, parse_pens, dump_pens, default_pens)
        self._livestock = await self._load_slot(
            self._livestock_key, parse_livestock, dump_livestock, default_livestock
        )
        self._loaded = True
        self._audit_pens()
        logger.info(
            "Farm data loaded: %d livestock records, %d pens",
            len(self._livestock),
            len(self._pens),
        )

    async def _load_slot(
        self,
        key: str,
        parse: Callable[[str], list[T]],
        dump: Callable[[list[T]], str],
        defaults: Callable[[], list[T]],
    ) -> list[T]:
        payload = await self._store.load(key)
        if payload is None:
            items = defaults()
            logger.info("Storage slot %s is empty; seeding %d default records", key, len(items))
            await self._store.save(key, dump(items))
            return items
        try:
            return parse(payload)
        except ValueError as exc:
            # pydantic.ValidationError is a ValueError; covers invalid JSON as well
            logger.warning("Storage slot %s could not be read, using defaults: %s", key, exc)
            return defaults()

    def _audit_pens(self) -> None:
        for pen in self._pens:
            categories = {x.category for x in self.get_livestock_in_pen(pen.id)}
            if not pen.is_flexible:
                categories.discard(pen.allowed_category)
                if categories:
                    logger.warning(
                        "Pen %s is restricted to %s but holds %s",
                        pen.id,
                        pen.allowed_category.value,
                        ", ".join(sorted(c.value for c in categories)),
                    )
            elif len(categories) > 1:
                logger.warning(
                    "Flexible pen %s holds mixed categories: %s",
                    pen.id,
                    ", ".join(sorted(c.value for c in categories)),
                )

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise InfrastructureError("Farm repository used before load()")

    # ------------------------------------------------------------------ persistence
    # Callers hold _write_lock.

    async def _commit_livestock(self, records: list[Livestock]) -> None:
        await self._store.save(self._livestock_key, dump_livestock(records))
        self._livestock = records

    async def _commit_pens(self, pens: list[Pen]) -> None:
        await self._store.save(self._pens_key, dump_pens(pens))
        self._pens = pens

    async def _commit_livestock_and_pens(
        self, records: list[Livestock], pens: list[Pen] | None
    ) -> None:
        previous = self._livestock
        await self._commit_livestock(records)
        if pens is None:
            return
        try:
            await self._commit_pens(pens)
        except Exception:
            # Put the livestock slot back so both slots stay at their old state
            try:
                await self._commit_livestock(previous)
            except Exception:
                logger.exception(
                    "Could not restore slot %s after a failed pen write", self._livestock_key
                )
                self._livestock = previous
            raise

    # ------------------------------------------------------------------ reads

    @property
    def livestock(self) -> list[Livestock]:
        return list(self._livestock)

    @property
    def pens(self) -> list[Pen]:
        return list(self._pens)

    def get_livestock_by_id(self, livestock_id: str) -> Livestock | None:
        return next((x for x in self._livestock if x.id == livestock_id), None)

    def get_livestock_in_pen(self, pen_id: str) -> list[Livestock]:
        return [x for x in self._livestock if x.pen_id == pen_id]

    def count_in_pen(self, pen_id: str) -> int:
        return sum(1 for x in self._livestock if x.pen_id == pen_id)

    def get_pen_by_id(self, pen_id: str) -> Pen | None:
        return next((x for x in self._pens if x.id == pen_id), None)

    def eligible_pens(self, category: LivestockCategory) -> list[Pen]:
        category = LivestockCategory(category)
        return [x for x in self._pens if x.accepts(category, self.get_livestock_in_pen(x.id))]

    def _livestock_index(self, livestock_id: str) -> int:
        for idx, item in enumerate(self._livestock):
            if item.id == livestock_id:
                return idx
        raise NotFound("Livestock not found", details={"livestock_id": livestock_id})

    def _pen_index(self, pen_id: str) -> int:
        for idx, item in enumerate(self._pens):
            if item.id == pen_id:
                return idx
        raise NotFound("Pen not found", details={"pen_id": pen_id})

    # ------------------------------------------------------------------ pen rule

    def _check_pen_assignment(self, record: Livestock) -> Pen | None:
        if not record.pen_id:
            return None
        pen = self.get_pen_by_id(record.pen_id)
        if pen is None:
            raise NotFound("Pen not found", details={"pen_id": record.pen_id})
        occupants = [x for x in self.get_livestock_in_pen(pen.id) if x.id != record.id]
        if not pen.accepts(record.category, occupants):
            raise ConflictError(
                f"Pen '{pen.name}' does not accept {record.category.value}",
                details={
                    "pen_id": pen.id,
                    "allowed_category": pen.allowed_category.value
                    if pen.allowed_category
                    else None,
                    "category": record.category.value,
                },
            )
        return pen

    def _pens_with_inferred_category(self, pen: Pen | None, record: Livestock) -> list[Pen] | None:
        """Pen list with ``pen`` restricted to the record's category, or None if unchanged."""
        if pen is None or not pen.is_flexible:
            return None
        others = [x for x in self.get_livestock_in_pen(pen.id) if x.id != record.id]
        if any(x.category != record.category for x in others):
            logger.warning("Pen %s left flexible: occupants already mix categories", pen.id)
            return None
        logger.info("Restricting pen %s to %s", pen.id, record.category.value)
        restricted = replace(pen, allowed_category=record.category)
        return [restricted if x.id == pen.id else x for x in self._pens]

    # ------------------------------------------------------------------ livestock mutators

    async def add_livestock(self, record: Livestock) -> Livestock:
        self._ensure_loaded()
        async with self._write_lock:
            record = replace(record, id=self._id_factory(), activity_logs=[], important_dates=[])
            pen = self._check_pen_assignment(record)
            pens = self._pens_with_inferred_category(pen, record)
            await self._commit_livestock_and_pens([*self._livestock, record], pens)
        return record

    async def update_livestock(self, record: Livestock) -> Livestock:
        self._ensure_loaded()
        async with self._write_lock:
            index = self._livestock_index(record.id)
            pen = self._check_pen_assignment(record)
            pens = self._pens_with_inferred_category(pen, record)
            records = list(self._livestock)
            records[index] = record
            await self._commit_livestock_and_pens(records, pens)
        return record

    async def add_activity_log(self, livestock_id: str, entry: ActivityLog) -> ActivityLog:
        self._ensure_loaded()
        async with self._write_lock:
            index = self._livestock_index(livestock_id)
            entry = replace(entry, id=self._id_factory())
            records = list(self._livestock)
            records[index] = self._with_log(records[index], entry)
            await self._commit_livestock(records)
        return entry

    async def add_important_date(self, livestock_id: str, entry: ImportantDate) -> ImportantDate:
        self._ensure_loaded()
        async with self._write_lock:
            index = self._livestock_index(livestock_id)
            entry = replace(entry, id=self._id_factory())
            records = list(self._livestock)
            record = records[index]
            dates = sorted([*record.important_dates, entry], key=lambda x: x.date)
            records[index] = replace(record, important_dates=dates)
            await self._commit_livestock(records)
        return entry

    async def add_bulk_activity_log_to_pen(
        self, pen_id: str, entry: ActivityLog
    ) -> list[ActivityLog]:
        """Append a copy of ``entry`` to every animal in the pen.

        Each copy gets its own identifier. Returns the created entries.
        """
        self._ensure_loaded()
        async with self._write_lock:
            self._pen_index(pen_id)
            created: list[ActivityLog] = []
            records = list(self._livestock)
            for index, record in enumerate(records):
                if record.pen_id != pen_id:
                    continue
                log = replace(entry, id=self._id_factory())
                records[index] = self._with_log(record, log)
                created.append(log)
            if created:
                await self._commit_livestock(records)
        logger.info(
            "Bulk %s log added to %d animals in pen %s", entry.type.value, len(created), pen_id
        )
        return created

    @staticmethod
    def _with_log(record: Livestock, entry: ActivityLog) -> Livestock:
        logs = sorted([*record.activity_logs, entry], key=lambda x: x.date, reverse=True)
        return replace(record, activity_logs=logs)

    # ------------------------------------------------------------------ pen mutators

    async def add_pen(self, pen: Pen) -> Pen:
        self._ensure_loaded()
        async with self._write_lock:
            pen = replace(pen, id=self._id_factory())
            await self._commit_pens([*self._pens, pen])
        return pen

    async def update_pen(self, pen: Pen) -> Pen:
        self._ensure_loaded()
        async with self._write_lock:
            index = self._pen_index(pen.id)
            pens = list(self._pens)
            pens[index] = pen
            await self._commit_pens(pens)
        return pen
