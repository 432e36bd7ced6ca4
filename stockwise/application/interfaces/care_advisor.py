from __future__ import annotations

from typing import Protocol, TypedDict


class CareStrategies(TypedDict):
    care_strategies: str
    reasoning: str


class CareAdvisor(Protocol):
    async def suggest_care_strategies(
        self, health_records: str, environmental_conditions: str
    ) -> CareStrategies: ...
