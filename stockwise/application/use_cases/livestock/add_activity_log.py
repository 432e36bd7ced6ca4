from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockwise.application.errors import ValidationError
from stockwise.domain.models.activity_log import ActivityLog, ActivityType
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.utils.datetime_tz import ensure_utc


@dataclass(slots=True)
class AddActivityLogInput:
    date: datetime
    type: ActivityType
    description: str


def build_entry(payload: AddActivityLogInput) -> ActivityLog:
    if not payload.description or not payload.description.strip():
        raise ValidationError("description is required")
    return ActivityLog.create(
        date=ensure_utc(payload.date),
        type=payload.type,
        description=payload.description.strip(),
    )


async def execute(
    repo: FarmRepository, livestock_id: str, payload: AddActivityLogInput
) -> ActivityLog:
    return await repo.add_activity_log(livestock_id, build_entry(payload))
