from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from stockwise.interfaces.http.schemas.livestock import LivestockResponse
from stockwise.interfaces.http.schemas.pens import PenResponse


class UpcomingDateResponse(BaseModel):
    id: str
    date: datetime
    event_name: str
    notes: str | None
    livestock_id: str
    tag: str
    display_name: str


class DashboardResponse(BaseModel):
    total_livestock: int
    total_pens: int
    pens: list[PenResponse]
    upcoming_dates: list[UpcomingDateResponse]
    recent_livestock: list[LivestockResponse]
