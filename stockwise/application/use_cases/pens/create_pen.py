from __future__ import annotations

from dataclasses import dataclass

from stockwise.application.errors import ValidationError
from stockwise.domain.models.livestock import LivestockCategory
from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.repos.farm_repository import FarmRepository


@dataclass(slots=True)
class CreatePenInput:
    name: str
    description: str | None = None
    allowed_category: LivestockCategory | None = None


async def execute(repo: FarmRepository, payload: CreatePenInput) -> Pen:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Pen name is required")
    pen = Pen.create(
        name=name,
        description=payload.description or None,
        allowed_category=payload.allowed_category,
    )
    return await repo.add_pen(pen)
