from __future__ import annotations

from stockwise.application.errors import ValidationError
from stockwise.domain.models.livestock import LivestockCategory
from stockwise.domain.models.pen import Pen
from stockwise.infrastructure.repos.farm_repository import FarmRepository


async def execute(repo: FarmRepository, category: LivestockCategory | str | None) -> list[Pen]:
    """Pens a new animal of ``category`` may be placed in. No category means all pens."""
    if category is None:
        return repo.pens
    try:
        category = LivestockCategory(category)
    except ValueError as exc:
        raise ValidationError(f"Unknown livestock category: {category!r}") from exc
    return repo.eligible_pens(category)
