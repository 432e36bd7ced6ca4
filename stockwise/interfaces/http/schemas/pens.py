from __future__ import annotations

from pydantic import BaseModel, Field

from stockwise.domain.models.livestock import LivestockCategory
from stockwise.domain.models.pen import Pen
from stockwise.interfaces.http.schemas.livestock import ActivityLogResponse, LivestockResponse


class PenBase(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None
    allowed_category: LivestockCategory | None = None


class PenCreate(PenBase):
    pass


class PenUpdate(PenBase):
    pass


class PenResponse(BaseModel):
    id: str
    name: str
    description: str | None
    allowed_category: LivestockCategory | None
    livestock_count: int | None = None

    @classmethod
    def from_domain(cls, pen: Pen, *, livestock_count: int | None = None) -> PenResponse:
        return cls(
            id=pen.id,
            name=pen.name,
            description=pen.description,
            allowed_category=pen.allowed_category,
            livestock_count=livestock_count,
        )


class PenDetailResponse(PenResponse):
    livestock: list[LivestockResponse]


class BulkActivityLogResponse(BaseModel):
    pen_id: str
    created: int
    logs: list[ActivityLogResponse]
