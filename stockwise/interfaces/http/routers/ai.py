from __future__ import annotations

from fastapi import APIRouter, Depends

from stockwise.application.interfaces.care_advisor import CareAdvisor
from stockwise.application.use_cases.ai import suggest_care_strategies
from stockwise.interfaces.http.deps import get_care_advisor
from stockwise.interfaces.http.schemas.ai import CareStrategiesRequest, CareStrategiesResponse

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/care-strategies", response_model=CareStrategiesResponse)
async def suggest_care_strategies_endpoint(
    payload: CareStrategiesRequest,
    advisor: CareAdvisor | None = Depends(get_care_advisor),
) -> CareStrategiesResponse:
    result = await suggest_care_strategies.execute(
        advisor,
        suggest_care_strategies.SuggestCareStrategiesInput(
            health_records=payload.health_records,
            environmental_conditions=payload.environmental_conditions,
        ),
    )
    return CareStrategiesResponse(**result)
