from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockwise.application.errors import ValidationError
from stockwise.domain.models.important_date import ImportantDate
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.utils.datetime_tz import ensure_utc


@dataclass(slots=True)
class AddImportantDateInput:
    date: datetime
    event_name: str
    notes: str | None = None


async def execute(
    repo: FarmRepository, livestock_id: str, payload: AddImportantDateInput
) -> ImportantDate:
    if not payload.event_name or not payload.event_name.strip():
        raise ValidationError("event_name is required")
    entry = ImportantDate.create(
        date=ensure_utc(payload.date),
        event_name=payload.event_name.strip(),
        notes=payload.notes or None,
    )
    return await repo.add_important_date(livestock_id, entry)
