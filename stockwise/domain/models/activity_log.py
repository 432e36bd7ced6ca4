from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from stockwise.domain.models.identifiers import new_id


class ActivityType(str, Enum):
    FEEDING = "Feeding"
    MEDICATION = "Medication"
    VACCINATION = "Vaccination"
    OBSERVATION = "Observation"
    OTHER = "Other"


@dataclass(slots=True, frozen=True)
class ActivityLog:
    id: str
    date: datetime
    type: ActivityType
    description: str

    @classmethod
    def create(cls, date: datetime, type: ActivityType, description: str) -> ActivityLog:
        return cls(id=new_id(), date=date, type=ActivityType(type), description=description)
