from __future__ import annotations

from dataclasses import dataclass

from stockwise.application.errors import ConflictError, NotFound, ValidationError
from stockwise.domain.models.livestock import LivestockCategory
from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.repos.farm_repository import FarmRepository


@dataclass(slots=True)
class UpdatePenInput:
    name: str
    description: str | None = None
    allowed_category: LivestockCategory | None = None


async def execute(repo: FarmRepository, pen_id: str, payload: UpdatePenInput) -> Pen:
    existing = repo.get_pen_by_id(pen_id)
    if not existing:
        raise NotFound("Pen not found")
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Pen name is required")
    if payload.allowed_category is not None:
        mismatched = [
            x.id
            for x in repo.get_livestock_in_pen(pen_id)
            if x.category != payload.allowed_category
        ]
        if mismatched:
            raise ConflictError(
                "Pen holds livestock of another category",
                details={"livestock_ids": mismatched},
            )
    pen = Pen(
        id=existing.id,
        name=name,
        description=payload.description or None,
        allowed_category=payload.allowed_category,
    )
    return await repo.update_pen(pen)
