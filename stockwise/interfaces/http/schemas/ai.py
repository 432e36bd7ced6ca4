from __future__ import annotations

from pydantic import BaseModel, Field


class CareStrategiesRequest(BaseModel):
    health_records: str = Field(
        min_length=1,
        description="Past illnesses, treatments and vaccinations of the livestock",
    )
    environmental_conditions: str = Field(
        min_length=1,
        description="Temperature, humidity and other conditions the livestock live in",
    )


class CareStrategiesResponse(BaseModel):
    care_strategies: str
    reasoning: str
