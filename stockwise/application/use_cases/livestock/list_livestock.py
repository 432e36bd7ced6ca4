from __future__ import annotations

from stockwise.domain.models.livestock import Livestock, LivestockCategory
from stockwise.infrastructure.repos.farm_repository import FarmRepository


async def execute(
    repo: FarmRepository,
    *,
    pen_id: str | None = None,
    category: LivestockCategory | None = None,
    search: str | None = None,
) -> list[Livestock]:
    items = repo.get_livestock_in_pen(pen_id) if pen_id else repo.livestock
    if category is not None:
        items = [x for x in items if x.category == category]
    if search:
        term = search.strip().lower()
        items = [x for x in items if term in x.tag.lower() or term in x.breed.lower()]
    return items
