from __future__ import annotations

from dataclasses import dataclass

from stockwise.application.errors import NotFound
from stockwise.domain.models.livestock import Livestock
from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.repos.farm_repository import FarmRepository


@dataclass(slots=True)
class PenDetail:
    pen: Pen
    livestock: list[Livestock]


async def execute(repo: FarmRepository, pen_id: str) -> PenDetail:
    pen = repo.get_pen_by_id(pen_id)
    if not pen:
        raise NotFound("Pen not found")
    return PenDetail(pen=pen, livestock=repo.get_livestock_in_pen(pen_id))
