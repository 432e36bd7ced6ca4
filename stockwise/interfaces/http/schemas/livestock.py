from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from stockwise.domain.models.activity_log import ActivityLog, ActivityType
from stockwise.domain.models.important_date import ImportantDate
from stockwise.domain.models.livestock import (
    BatchLivestock,
    Gender,
    IndividualLivestock,
    Livestock,
    LivestockCategory,
)


class LivestockBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tag: str = Field(min_length=1, description="Animal ID/tag, or batch/colony ID")
    breed: str = Field(min_length=1, description="Breed, or type/strain for batches")
    pen_id: str | None = None
    health_records: str | None = None
    image_url: str | None = None
    image_hint: str | None = None


class IndividualLivestockIn(LivestockBase):
    category: Literal["Mega Stock", "Mid Stock"]
    birth_date: date
    gender: Gender


class BatchLivestockIn(LivestockBase):
    category: Literal["Mini Stock", "Micro Stock"]
    quantity: int = Field(ge=1)
    birth_date: date | None = None


# Discriminated on "category"; routers pass Body(discriminator="category")
LivestockIn = Union[IndividualLivestockIn, BatchLivestockIn]


class ActivityLogCreate(BaseModel):
    date: datetime
    type: ActivityType
    description: str = Field(min_length=1, max_length=2000)


class BulkActivityLogCreate(ActivityLogCreate):
    description: str = Field(min_length=1, max_length=200)


class ImportantDateCreate(BaseModel):
    date: datetime
    event_name: str = Field(min_length=1)
    notes: str | None = None


class ActivityLogResponse(BaseModel):
    id: str
    date: datetime
    type: ActivityType
    description: str

    @classmethod
    def from_domain(cls, log: ActivityLog) -> ActivityLogResponse:
        return cls(id=log.id, date=log.date, type=log.type, description=log.description)


class ImportantDateResponse(BaseModel):
    id: str
    date: datetime
    event_name: str
    notes: str | None

    @classmethod
    def from_domain(cls, entry: ImportantDate) -> ImportantDateResponse:
        return cls(id=entry.id, date=entry.date, event_name=entry.event_name, notes=entry.notes)


class LivestockResponse(BaseModel):
    id: str
    category: LivestockCategory
    kind: Literal["individual", "batch"]
    tag: str
    breed: str
    display_name: str
    pen_id: str | None
    health_records: str | None
    image_url: str | None
    image_hint: str | None
    birth_date: date | None
    gender: Gender | None = None
    quantity: int | None = None
    activity_logs: list[ActivityLogResponse]
    important_dates: list[ImportantDateResponse]

    @classmethod
    def from_domain(cls, record: Livestock) -> LivestockResponse:
        return cls(
            id=record.id,
            category=record.category,
            kind="individual" if isinstance(record, IndividualLivestock) else "batch",
            tag=record.tag,
            breed=record.breed,
            display_name=record.display_name,
            pen_id=record.pen_id,
            health_records=record.health_records,
            image_url=record.image_url,
            image_hint=record.image_hint,
            birth_date=record.birth_date,
            gender=record.gender if isinstance(record, IndividualLivestock) else None,
            quantity=record.quantity if isinstance(record, BatchLivestock) else None,
            activity_logs=[ActivityLogResponse.from_domain(x) for x in record.activity_logs],
            important_dates=[ImportantDateResponse.from_domain(x) for x in record.important_dates],
        )
