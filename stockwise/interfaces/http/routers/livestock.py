from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query, status

from stockwise.application.use_cases.livestock import (
    add_activity_log,
    add_important_date,
    create_livestock,
    get_livestock,
    list_livestock,
    update_livestock,
)
from stockwise.domain.models.livestock import LivestockCategory
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.interfaces.http.deps import get_farm
from stockwise.interfaces.http.schemas.livestock import (
    ActivityLogCreate,
    ActivityLogResponse,
    ImportantDateCreate,
    ImportantDateResponse,
    IndividualLivestockIn,
    LivestockIn,
    LivestockResponse,
)

router = APIRouter(prefix="/livestock", tags=["livestock"])

LivestockBody = Annotated[LivestockIn, Body(discriminator="category")]


def _to_input(payload: LivestockIn, cls=create_livestock.CreateLivestockInput):
    return cls(
        category=LivestockCategory(payload.category),
        tag=payload.tag,
        breed=payload.breed,
        pen_id=payload.pen_id,
        health_records=payload.health_records,
        image_url=payload.image_url,
        image_hint=payload.image_hint,
        birth_date=payload.birth_date,
        gender=payload.gender if isinstance(payload, IndividualLivestockIn) else None,
        quantity=None if isinstance(payload, IndividualLivestockIn) else payload.quantity,
    )


@router.get("/", response_model=list[LivestockResponse])
async def list_livestock_endpoint(
    pen_id: str | None = Query(None),
    category: LivestockCategory | None = Query(None),
    q: str | None = Query(None, description="Text search across tag and breed"),
    farm: FarmRepository = Depends(get_farm),
):
    items = await list_livestock.execute(farm, pen_id=pen_id, category=category, search=q)
    return [LivestockResponse.from_domain(x) for x in items]


@router.post("/", response_model=LivestockResponse, status_code=status.HTTP_201_CREATED)
async def create_livestock_endpoint(
    payload: LivestockBody,
    farm: FarmRepository = Depends(get_farm),
):
    created = await create_livestock.execute(farm, _to_input(payload))
    return LivestockResponse.from_domain(created)


@router.get("/{livestock_id}", response_model=LivestockResponse)
async def get_livestock_endpoint(livestock_id: str, farm: FarmRepository = Depends(get_farm)):
    record = await get_livestock.execute(farm, livestock_id)
    return LivestockResponse.from_domain(record)


@router.put("/{livestock_id}", response_model=LivestockResponse)
async def update_livestock_endpoint(
    livestock_id: str,
    payload: LivestockBody,
    farm: FarmRepository = Depends(get_farm),
):
    updated = await update_livestock.execute(
        farm, livestock_id, _to_input(payload, update_livestock.UpdateLivestockInput)
    )
    return LivestockResponse.from_domain(updated)


@router.post(
    "/{livestock_id}/activity-logs",
    response_model=ActivityLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_activity_log_endpoint(
    livestock_id: str,
    payload: ActivityLogCreate,
    farm: FarmRepository = Depends(get_farm),
):
    entry = await add_activity_log.execute(
        farm,
        livestock_id,
        add_activity_log.AddActivityLogInput(
            date=payload.date, type=payload.type, description=payload.description
        ),
    )
    return ActivityLogResponse.from_domain(entry)


@router.post(
    "/{livestock_id}/important-dates",
    response_model=ImportantDateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_important_date_endpoint(
    livestock_id: str,
    payload: ImportantDateCreate,
    farm: FarmRepository = Depends(get_farm),
):
    entry = await add_important_date.execute(
        farm,
        livestock_id,
        add_important_date.AddImportantDateInput(
            date=payload.date, event_name=payload.event_name, notes=payload.notes
        ),
    )
    return ImportantDateResponse.from_domain(entry)
