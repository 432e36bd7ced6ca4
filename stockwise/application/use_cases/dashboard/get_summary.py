from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockwise.application.use_cases.pens.list_pens import PenSummary
from stockwise.domain.models.important_date import ImportantDate
from stockwise.domain.models.livestock import Livestock
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.utils.datetime_tz import ensure_utc, utcnow


@dataclass(slots=True)
class UpcomingDate:
    entry: ImportantDate
    livestock_id: str
    tag: str
    display_name: str


@dataclass(slots=True)
class DashboardSummary:
    total_livestock: int
    total_pens: int
    pens: list[PenSummary]
    upcoming_dates: list[UpcomingDate]
    recent_livestock: list[Livestock]


async def execute(
    repo: FarmRepository,
    *,
    now: datetime | None = None,
    upcoming_limit: int = 5,
    recent_limit: int = 4,
) -> DashboardSummary:
    now = ensure_utc(now) if now else utcnow()
    livestock = repo.livestock
    upcoming = [
        UpcomingDate(entry=d, livestock_id=x.id, tag=x.tag, display_name=x.display_name)
        for x in livestock
        for d in x.important_dates
        if d.date >= now
    ]
    upcoming.sort(key=lambda u: u.entry.date)
    # Collections are append-only, so insertion order is registration order
    recent = list(reversed(livestock[-recent_limit:])) if recent_limit > 0 else []
    return DashboardSummary(
        total_livestock=len(livestock),
        total_pens=len(repo.pens),
        pens=[PenSummary(pen=p, livestock_count=repo.count_in_pen(p.id)) for p in repo.pens],
        upcoming_dates=upcoming[:upcoming_limit],
        recent_livestock=recent,
    )
