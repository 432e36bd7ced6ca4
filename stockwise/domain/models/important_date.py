from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockwise.domain.models.identifiers import new_id


@dataclass(slots=True, frozen=True)
class ImportantDate:
    id: str
    date: datetime
    event_name: str
    notes: str | None = None

    @classmethod
    def create(cls, date: datetime, event_name: str, notes: str | None = None) -> ImportantDate:
        return cls(id=new_id(), date=date, event_name=event_name, notes=notes)
