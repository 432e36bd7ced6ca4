from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from stockwise.application.use_cases.livestock.add_activity_log import AddActivityLogInput
from stockwise.application.use_cases.pens import (
    add_bulk_activity_log,
    create_pen,
    get_pen,
    list_eligible_pens,
    list_pens,
    update_pen,
)
from stockwise.domain.models.livestock import LivestockCategory
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.interfaces.http.deps import get_farm
from stockwise.interfaces.http.schemas.livestock import (
    ActivityLogResponse,
    BulkActivityLogCreate,
    LivestockResponse,
)
from stockwise.interfaces.http.schemas.pens import (
    BulkActivityLogResponse,
    PenCreate,
    PenDetailResponse,
    PenResponse,
    PenUpdate,
)

router = APIRouter(prefix="/pens", tags=["pens"])


@router.get("/", response_model=list[PenResponse])
async def list_pens_endpoint(farm: FarmRepository = Depends(get_farm)):
    items = await list_pens.execute(farm)
    return [PenResponse.from_domain(x.pen, livestock_count=x.livestock_count) for x in items]


@router.get("/eligible", response_model=list[PenResponse])
async def list_eligible_pens_endpoint(
    category: LivestockCategory | None = Query(
        None, description="Livestock category the pen must accept"
    ),
    farm: FarmRepository = Depends(get_farm),
):
    pens = await list_eligible_pens.execute(farm, category)
    return [PenResponse.from_domain(x, livestock_count=farm.count_in_pen(x.id)) for x in pens]


@router.post("/", response_model=PenResponse, status_code=status.HTTP_201_CREATED)
async def create_pen_endpoint(payload: PenCreate, farm: FarmRepository = Depends(get_farm)):
    created = await create_pen.execute(
        farm,
        create_pen.CreatePenInput(
            name=payload.name,
            description=payload.description,
            allowed_category=payload.allowed_category,
        ),
    )
    return PenResponse.from_domain(created, livestock_count=0)


@router.get("/{pen_id}", response_model=PenDetailResponse)
async def get_pen_endpoint(pen_id: str, farm: FarmRepository = Depends(get_farm)):
    detail = await get_pen.execute(farm, pen_id)
    base = PenResponse.from_domain(detail.pen, livestock_count=len(detail.livestock))
    return PenDetailResponse(
        **base.model_dump(),
        livestock=[LivestockResponse.from_domain(x) for x in detail.livestock],
    )


@router.put("/{pen_id}", response_model=PenResponse)
async def update_pen_endpoint(
    pen_id: str,
    payload: PenUpdate,
    farm: FarmRepository = Depends(get_farm),
):
    updated = await update_pen.execute(
        farm,
        pen_id,
        update_pen.UpdatePenInput(
            name=payload.name,
            description=payload.description,
            allowed_category=payload.allowed_category,
        ),
    )
    return PenResponse.from_domain(updated, livestock_count=farm.count_in_pen(updated.id))


@router.post(
    "/{pen_id}/activity-logs",
    response_model=BulkActivityLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_bulk_activity_log_endpoint(
    pen_id: str,
    payload: BulkActivityLogCreate,
    farm: FarmRepository = Depends(get_farm),
):
    logs = await add_bulk_activity_log.execute(
        farm,
        pen_id,
        AddActivityLogInput(date=payload.date, type=payload.type, description=payload.description),
    )
    return BulkActivityLogResponse(
        pen_id=pen_id,
        created=len(logs),
        logs=[ActivityLogResponse.from_domain(x) for x in logs],
    )
