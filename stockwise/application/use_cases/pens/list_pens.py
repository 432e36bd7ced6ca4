from __future__ import annotations

from dataclasses import dataclass

from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.repos.farm_repository import FarmRepository


@dataclass(slots=True)
class PenSummary:
    pen: Pen
    livestock_count: int


async def execute(repo: FarmRepository) -> list[PenSummary]:
    return [PenSummary(pen=x, livestock_count=repo.count_in_pen(x.id)) for x in repo.pens]
