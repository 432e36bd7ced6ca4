"""Stored JSON shape of the livestock and pen collections.

Field names follow the camelCase keys of the browser-era storage format.
Every livestock document also carries a ``livestockType`` discriminator,
which the browser-era records did not have, so such payloads are rejected
and the repository falls back to its defaults.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from stockwise.domain.models.activity_log import ActivityLog, ActivityType
from stockwise.domain.models.important_date import ImportantDate
from stockwise.domain.models.livestock import (
    BatchLivestock,
    Gender,
    IndividualLivestock,
    Livestock,
    LivestockCategory,
)
from stockwise.domain.models.pen import Pen
from stockwise.utils.datetime_tz import ensure_utc


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ActivityLogDocument(_Document):
    id: str
    date: datetime
    type: ActivityType
    description: str


class ImportantDateDocument(_Document):
    id: str
    date: datetime
    event_name: str = Field(alias="eventName")
    notes: str | None = None


class _LivestockDocument(_Document):
    id: str
    animal_id: str = Field(alias="animalId")
    breed: str
    pen_id: str | None = Field(default=None, alias="penId")
    health_records: str | None = Field(default=None, alias="healthRecords")
    activity_logs: list[ActivityLogDocument] = Field(default_factory=list, alias="activityLogs")
    important_dates: list[ImportantDateDocument] = Field(
        default_factory=list, alias="importantDates"
    )
    image_url: str | None = Field(default=None, alias="imageUrl")
    data_ai_hint: str | None = Field(default=None, alias="dataAiHint")

    @field_validator("birth_date", mode="before", check_fields=False)
    @classmethod
    def strip_time_component(cls, value):
        # Older payloads stored birth dates as full ISO timestamps
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class IndividualLivestockDocument(_LivestockDocument):
    livestock_type: Literal["Mega Stock", "Mid Stock"] = Field(alias="livestockType")
    birth_date: date = Field(alias="birthDate")
    gender: Gender


class BatchLivestockDocument(_LivestockDocument):
    livestock_type: Literal["Mini Stock", "Micro Stock"] = Field(alias="livestockType")
    quantity: int = Field(ge=1)
    birth_date: date | None = Field(default=None, alias="birthDate")


LivestockDocument = Annotated[
    Union[IndividualLivestockDocument, BatchLivestockDocument],
    Field(discriminator="livestock_type"),
]


class PenDocument(_Document):
    id: str
    name: str = Field(min_length=1)
    description: str | None = None
    allowed_livestock_type: LivestockCategory | None = Field(
        default=None, alias="allowedLivestockType"
    )


_livestock_adapter = TypeAdapter(list[LivestockDocument])
_pens_adapter = TypeAdapter(list[PenDocument])


def _log_to_document(log: ActivityLog) -> ActivityLogDocument:
    return ActivityLogDocument(id=log.id, date=log.date, type=log.type, description=log.description)


def _date_to_document(entry: ImportantDate) -> ImportantDateDocument:
    return ImportantDateDocument(
        id=entry.id, date=entry.date, event_name=entry.event_name, notes=entry.notes
    )


def livestock_to_document(
    record: Livestock,
) -> IndividualLivestockDocument | BatchLivestockDocument:
    common = dict(
        id=record.id,
        livestock_type=record.category.value,
        animal_id=record.tag,
        breed=record.breed,
        pen_id=record.pen_id,
        health_records=record.health_records,
        activity_logs=[_log_to_document(x) for x in record.activity_logs],
        important_dates=[_date_to_document(x) for x in record.important_dates],
        image_url=record.image_url,
        data_ai_hint=record.image_hint,
        birth_date=record.birth_date,
    )
    if isinstance(record, IndividualLivestock):
        return IndividualLivestockDocument(**common, gender=record.gender)
    return BatchLivestockDocument(**common, quantity=record.quantity)


def livestock_from_document(
    doc: IndividualLivestockDocument | BatchLivestockDocument,
) -> Livestock:
    common = dict(
        id=doc.id,
        category=LivestockCategory(doc.livestock_type),
        tag=doc.animal_id,
        breed=doc.breed,
        pen_id=doc.pen_id,
        health_records=doc.health_records,
        activity_logs=[
            ActivityLog(id=x.id, date=ensure_utc(x.date), type=x.type, description=x.description)
            for x in doc.activity_logs
        ],
        important_dates=[
            ImportantDate(id=x.id, date=ensure_utc(x.date), event_name=x.event_name, notes=x.notes)
            for x in doc.important_dates
        ],
        image_url=doc.image_url,
        image_hint=doc.data_ai_hint,
        birth_date=doc.birth_date,
    )
    if isinstance(doc, IndividualLivestockDocument):
        return IndividualLivestock(**common, gender=doc.gender)
    return BatchLivestock(**common, quantity=doc.quantity)


def pen_to_document(pen: Pen) -> PenDocument:
    return PenDocument(
        id=pen.id,
        name=pen.name,
        description=pen.description,
        allowed_livestock_type=pen.allowed_category,
    )


def pen_from_document(doc: PenDocument) -> Pen:
    return Pen(
        id=doc.id,
        name=doc.name,
        description=doc.description,
        allowed_category=doc.allowed_livestock_type,
    )


def dump_livestock(records: list[Livestock]) -> str:
    docs = [livestock_to_document(x) for x in records]
    return _livestock_adapter.dump_json(docs, by_alias=True, exclude_none=True).decode("utf-8")


def parse_livestock(payload: str) -> list[Livestock]:
    """Parse a stored livestock slot. Raises pydantic.ValidationError on bad input."""
    return [livestock_from_document(x) for x in _livestock_adapter.validate_json(payload)]


def dump_pens(pens: list[Pen]) -> str:
    docs = [pen_to_document(x) for x in pens]
    return _pens_adapter.dump_json(docs, by_alias=True, exclude_none=True).decode("utf-8")


def parse_pens(payload: str) -> list[Pen]:
    return [pen_from_document(x) for x in _pens_adapter.validate_json(payload)]
