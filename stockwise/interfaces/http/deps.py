from __future__ import annotations

from fastapi import Request

from stockwise.application.interfaces.care_advisor import CareAdvisor
from stockwise.config.settings import Settings, get_settings
from stockwise.infrastructure.repos.farm_repository import FarmRepository


def get_farm(request: Request) -> FarmRepository:
    farm = getattr(request.app.state, "farm", None)
    if farm is None:
        raise RuntimeError("Farm repository not configured")
    return farm


def get_care_advisor(request: Request) -> CareAdvisor | None:
    return getattr(request.app.state, "care_advisor", None)


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()
