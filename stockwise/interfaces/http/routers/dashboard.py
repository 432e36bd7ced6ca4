from __future__ import annotations

from fastapi import APIRouter, Depends

from stockwise.application.use_cases.dashboard import get_summary
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.interfaces.http.deps import get_farm
from stockwise.interfaces.http.schemas.dashboard import DashboardResponse, UpcomingDateResponse
from stockwise.interfaces.http.schemas.livestock import LivestockResponse
from stockwise.interfaces.http.schemas.pens import PenResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/", response_model=DashboardResponse)
async def get_dashboard(farm: FarmRepository = Depends(get_farm)) -> DashboardResponse:
    summary = await get_summary.execute(farm)
    return DashboardResponse(
        total_livestock=summary.total_livestock,
        total_pens=summary.total_pens,
        pens=[
            PenResponse.from_domain(x.pen, livestock_count=x.livestock_count)
            for x in summary.pens
        ],
        upcoming_dates=[
            UpcomingDateResponse(
                id=u.entry.id,
                date=u.entry.date,
                event_name=u.entry.event_name,
                notes=u.entry.notes,
                livestock_id=u.livestock_id,
                tag=u.tag,
                display_name=u.display_name,
            )
            for u in summary.upcoming_dates
        ],
        recent_livestock=[LivestockResponse.from_domain(x) for x in summary.recent_livestock],
    )
