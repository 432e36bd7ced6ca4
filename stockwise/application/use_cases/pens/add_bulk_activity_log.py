from __future__ import annotations

from stockwise.application.use_cases.livestock.add_activity_log import (
    AddActivityLogInput,
    build_entry,
)
from stockwise.domain.models.activity_log import ActivityLog
from stockwise.infrastructure.repos.farm_repository import FarmRepository


async def execute(
    repo: FarmRepository, pen_id: str, payload: AddActivityLogInput
) -> list[ActivityLog]:
    return await repo.add_bulk_activity_log_to_pen(pen_id, build_entry(payload))
