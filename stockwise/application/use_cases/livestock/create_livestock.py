from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from stockwise.application.errors import ValidationError
from stockwise.domain.models.livestock import (
    BatchLivestock,
    Gender,
    IndividualLivestock,
    Livestock,
    LivestockCategory,
)
from stockwise.infrastructure.repos.farm_repository import FarmRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateLivestockInput:
    category: LivestockCategory
    tag: str
    breed: str
    pen_id: str | None = None
    health_records: str | None = None
    image_url: str | None = None
    image_hint: str | None = None
    birth_date: date | None = None
    # Individual only
    gender: Gender | None = None
    # Batch only
    quantity: int | None = None


def build_record(payload: CreateLivestockInput, *, record_id: str = "") -> Livestock:
    """Build the Individual or Batch variant selected by ``payload.category``."""
    try:
        category = LivestockCategory(payload.category)
    except ValueError as exc:
        raise ValidationError(f"Unknown livestock category: {payload.category!r}") from exc
    if not payload.tag or not payload.tag.strip():
        raise ValidationError("tag is required")
    if not payload.breed or not payload.breed.strip():
        raise ValidationError("breed is required")
    common = dict(
        id=record_id,
        category=category,
        tag=payload.tag.strip(),
        breed=payload.breed.strip(),
        pen_id=payload.pen_id or None,
        health_records=payload.health_records,
        image_url=payload.image_url or None,
        image_hint=payload.image_hint,
    )
    if category.is_individual:
        if payload.quantity is not None:
            raise ValidationError("quantity does not apply to individual livestock")
        if payload.birth_date is None:
            raise ValidationError("birth_date is required for individual livestock")
        return IndividualLivestock(
            **common,
            birth_date=payload.birth_date,
            gender=payload.gender or Gender.UNKNOWN,
        )
    if payload.gender is not None:
        raise ValidationError("gender does not apply to batch livestock")
    if payload.quantity is None or payload.quantity < 1:
        raise ValidationError("quantity must be at least 1 for batch livestock")
    return BatchLivestock(**common, quantity=payload.quantity, birth_date=payload.birth_date)


async def execute(repo: FarmRepository, payload: CreateLivestockInput) -> Livestock:
    record = build_record(payload)
    created = await repo.add_livestock(record)
    logger.info("Livestock %s (%s) registered", created.id, created.category.value)
    return created
