from __future__ import annotations

from dataclasses import dataclass, replace

from stockwise.application.errors import NotFound
from stockwise.application.use_cases.livestock.create_livestock import (
    CreateLivestockInput,
    build_record,
)
from stockwise.domain.models.livestock import Livestock
from stockwise.infrastructure.repos.farm_repository import FarmRepository


@dataclass(slots=True)
class UpdateLivestockInput(CreateLivestockInput):
    pass


async def execute(
    repo: FarmRepository, livestock_id: str, payload: UpdateLivestockInput
) -> Livestock:
    existing = repo.get_livestock_by_id(livestock_id)
    if not existing:
        raise NotFound("Livestock not found")
    # Logs and dates have their own endpoints; the edit replaces everything else
    record = replace(
        build_record(payload, record_id=existing.id),
        activity_logs=list(existing.activity_logs),
        important_dates=list(existing.important_dates),
    )
    return await repo.update_livestock(record)
