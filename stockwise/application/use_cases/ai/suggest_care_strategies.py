from __future__ import annotations

import logging
from dataclasses import dataclass

from stockwise.application.errors import AIServiceError, ServiceUnavailable, ValidationError
from stockwise.application.interfaces.care_advisor import CareAdvisor, CareStrategies

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SuggestCareStrategiesInput:
    health_records: str
    environmental_conditions: str


async def execute(
    advisor: CareAdvisor | None, payload: SuggestCareStrategiesInput
) -> CareStrategies:
    if advisor is None:
        raise ServiceUnavailable("AI assistant is not configured")
    if not payload.health_records or not payload.health_records.strip():
        raise ValidationError("health_records is required")
    if not payload.environmental_conditions or not payload.environmental_conditions.strip():
        raise ValidationError("environmental_conditions is required")
    try:
        return await advisor.suggest_care_strategies(
            payload.health_records.strip(), payload.environmental_conditions.strip()
        )
    except Exception as exc:
        logger.error("Care strategy suggestion failed: %s", exc)
        raise AIServiceError(
            "Could not get care suggestions right now. Please try again.",
            details={"reason": str(exc)},
        ) from exc
