from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Union

from stockwise.domain.models.activity_log import ActivityLog
from stockwise.domain.models.identifiers import new_id
from stockwise.domain.models.important_date import ImportantDate


class LivestockCategory(str, Enum):
    MEGA = "Mega Stock"
    MID = "Mid Stock"
    MINI = "Mini Stock"
    MICRO = "Micro Stock"

    @property
    def is_individual(self) -> bool:
        return self in (LivestockCategory.MEGA, LivestockCategory.MID)

    @property
    def is_batch(self) -> bool:
        return not self.is_individual


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"


@dataclass(slots=True, kw_only=True)
class _LivestockBase:
    id: str
    category: LivestockCategory
    # Individual: ear tag / animal ID. Batch: batch or colony ID.
    tag: str
    # Individual: breed. Batch: type or strain.
    breed: str
    pen_id: str | None = None
    health_records: str | None = None
    activity_logs: list[ActivityLog] = field(default_factory=list)
    important_dates: list[ImportantDate] = field(default_factory=list)
    image_url: str | None = None
    image_hint: str | None = None

    @property
    def display_name(self) -> str:
        return f"{self.breed} {self.tag}"


@dataclass(slots=True, kw_only=True)
class IndividualLivestock(_LivestockBase):
    birth_date: date
    gender: Gender = Gender.UNKNOWN

    def __post_init__(self) -> None:
        self.category = LivestockCategory(self.category)
        if not self.category.is_individual:
            raise ValueError(f"{self.category.value} is not an individual livestock category")
        self.gender = Gender(self.gender)

    @classmethod
    def create(
        cls,
        *,
        category: LivestockCategory,
        tag: str,
        breed: str,
        birth_date: date,
        gender: Gender = Gender.UNKNOWN,
        pen_id: str | None = None,
        health_records: str | None = None,
        image_url: str | None = None,
        image_hint: str | None = None,
    ) -> IndividualLivestock:
        return cls(
            id=new_id(),
            category=category,
            tag=tag,
            breed=breed,
            birth_date=birth_date,
            gender=gender,
            pen_id=pen_id,
            health_records=health_records,
            image_url=image_url,
            image_hint=image_hint,
        )


@dataclass(slots=True, kw_only=True)
class BatchLivestock(_LivestockBase):
    quantity: int
    # Hatch or start date, optional for batches
    birth_date: date | None = None

    def __post_init__(self) -> None:
        self.category = LivestockCategory(self.category)
        if not self.category.is_batch:
            raise ValueError(f"{self.category.value} is not a batch livestock category")
        if self.quantity < 1:
            raise ValueError("Batch quantity must be at least 1")

    @classmethod
    def create(
        cls,
        *,
        category: LivestockCategory,
        tag: str,
        breed: str,
        quantity: int,
        birth_date: date | None = None,
        pen_id: str | None = None,
        health_records: str | None = None,
        image_url: str | None = None,
        image_hint: str | None = None,
    ) -> BatchLivestock:
        return cls(
            id=new_id(),
            category=category,
            tag=tag,
            breed=breed,
            quantity=quantity,
            birth_date=birth_date,
            pen_id=pen_id,
            health_records=health_records,
            image_url=image_url,
            image_hint=image_hint,
        )


Livestock = Union[IndividualLivestock, BatchLivestock]
