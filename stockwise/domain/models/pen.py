from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stockwise.domain.models.identifiers import new_id
from stockwise.domain.models.livestock import LivestockCategory

if TYPE_CHECKING:
    from stockwise.domain.models.livestock import Livestock


@dataclass(slots=True)
class Pen:
    id: str
    name: str
    description: str | None = None
    # None means flexible until the first animal is assigned
    allowed_category: LivestockCategory | None = None

    def __post_init__(self) -> None:
        if self.allowed_category is not None:
            self.allowed_category = LivestockCategory(self.allowed_category)

    @classmethod
    def create(
        cls,
        name: str,
        *,
        description: str | None = None,
        allowed_category: LivestockCategory | None = None,
    ) -> Pen:
        return cls(
            id=new_id(),
            name=name,
            description=description,
            allowed_category=allowed_category,
        )

    @property
    def is_flexible(self) -> bool:
        return self.allowed_category is None

    def accepts(self, category: LivestockCategory, occupants: Iterable[Livestock]) -> bool:
        """Return whether an animal of ``category`` may be placed in this pen.

        A restricted pen only takes its own category. A flexible pen takes
        anything as long as every current occupant shares the category.
        """
        category = LivestockCategory(category)
        if not self.is_flexible:
            return self.allowed_category == category
        return all(animal.category == category for animal in occupants)
