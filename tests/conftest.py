from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.pop("OPENAI_API_KEY", None)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from stockwise.application.errors import InfrastructureError
from stockwise.application.interfaces.care_advisor import CareStrategies
from stockwise.config.settings import Settings
from stockwise.infrastructure.db.session import create_schema
from stockwise.infrastructure.repos.farm_repository import FarmRepository
from stockwise.infrastructure.storage.json_store_sqlalchemy import SQLAlchemyJsonStore
from stockwise.interfaces.http.main import create_app, startup

LIVESTOCK_KEY = "stockwiseLivestock"
PENS_KEY = "stockwisePens"


class InMemoryJsonStore:
    def __init__(self, slots: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(slots or {})
        self.saved_keys: list[str] = []
        # Writes to these keys fail as a database outage would
        self.fail_keys: set[str] = set()

    async def load(self, key: str) -> str | None:
        return self.slots.get(key)

    async def save(self, key: str, payload: str) -> None:
        if key in self.fail_keys:
            raise InfrastructureError(f"Failed to write storage slot {key!r}")
        self.slots[key] = payload
        self.saved_keys.append(key)


class StubCareAdvisor:
    def __init__(self, *, result: CareStrategies | None = None, error: Exception | None = None):
        self.result = result or {
            "care_strategies": "Provide shade and fresh water twice a day.",
            "reasoning": "High temperatures raise dehydration risk.",
        }
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def suggest_care_strategies(
        self, health_records: str, environmental_conditions: str
    ) -> CareStrategies:
        self.calls.append((health_records, environmental_conditions))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture()
def empty_store() -> InMemoryJsonStore:
    return InMemoryJsonStore({LIVESTOCK_KEY: "[]", PENS_KEY: "[]"})


@pytest.fixture()
async def farm(empty_store: InMemoryJsonStore) -> FarmRepository:
    repo = FarmRepository(empty_store)
    await repo.load()
    return repo


@pytest.fixture()
def advisor() -> StubCareAdvisor:
    return StubCareAdvisor()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings, advisor: StubCareAdvisor):
    return create_app(settings=test_settings, care_advisor=advisor)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    # Start from empty collections instead of the built-in sample farm
    await create_schema(app.state.engine)
    store = SQLAlchemyJsonStore(app.state.session_factory)
    await store.save(LIVESTOCK_KEY, "[]")
    await store.save(PENS_KEY, "[]")
    await startup(app)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_client(app) -> AsyncIterator[AsyncClient]:
    # Fresh database: startup seeds the built-in sample farm
    await startup(app)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def store_factory() -> type[InMemoryJsonStore]:
    return InMemoryJsonStore
