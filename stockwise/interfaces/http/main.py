from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockwise.application.interfaces.care_advisor import CareAdvisor
from stockwise.config.settings import Settings, get_settings
from stockwise.infrastructure.db.session import create_engine, create_schema, create_session_factory
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.infrastructure.storage.json_store_sqlalchemy import SQLAlchemyJsonStore
from stockwise.interfaces.http.deps import get_app_settings
from stockwise.interfaces.http.routers import ai, dashboard, livestock, pens
from stockwise.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


async def startup(app: FastAPI) -> None:
    """Create the schema if asked to, then load the farm collections once."""
    settings: Settings = app.state.settings
    if settings.auto_create_schema:
        await create_schema(app.state.engine)
    farm: FarmRepository = app.state.farm
    if not farm.loaded:
        await farm.load()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # Align common libraries
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "httpx"):
        logging.getLogger(name).setLevel(level)


def _build_care_advisor(settings: Settings) -> CareAdvisor | None:
    if not settings.openai_api_key:
        logger.info("OPENAI_API_KEY not set; AI care suggestions disabled")
        return None
    from stockwise.infrastructure.services.openai_service import OpenAIService

    return OpenAIService(settings.openai_api_key.get_secret_value(), model=settings.openai_model)


def create_app(
    *,
    settings: Settings | None = None,
    care_advisor: CareAdvisor | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="StockWise Backend",
        version="0.1.0",
        description="Livestock, pen and activity records for StockWise",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.farm = FarmRepository(
        SQLAlchemyJsonStore(app.state.session_factory),
        livestock_key=settings.livestock_storage_key,
        pens_key=settings.pens_storage_key,
    )
    app.state.care_advisor = care_advisor or _build_care_advisor(settings)
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(livestock.router)
    api.include_router(pens.router)
    api.include_router(dashboard.router)
    api.include_router(ai.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
