from __future__ import annotations

from stockwise.application.errors import NotFound
from stockwise.domain.models.livestock import Livestock
from stockwise.infrastructure.repos.farm_repository import FarmRepository


async def execute(repo: FarmRepository, livestock_id: str) -> Livestock:
    record = repo.get_livestock_by_id(livestock_id)
    if not record:
        raise NotFound("Livestock not found")
    return record
