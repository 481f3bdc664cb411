from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.animal import AnimalRecord
from src.domain.models.health_plan import HealthPlanTemplate, PlanTask
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings() -> Settings:
    return Settings.model_validate(
        {
            "log_level": "INFO",
            "environment": "test",
            "voluntary_waiting_days": 50,
            "due_soon_days": 7,
            "default_health_plan_id": "default-calf-plan",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def cow() -> AnimalRecord:
    return AnimalRecord(
        id="101",
        name="Daisy",
        sex="female",
        birth_date="2020-05-15",
        category="cow",
        last_calving_date="2024-01-10",
        heat_date="2024-03-01",
    )


@pytest.fixture()
def calf_plan() -> HealthPlanTemplate:
    return HealthPlanTemplate(
        id="default-calf-plan",
        name="Default calf plan",
        tasks=[
            PlanTask(name="Colostrum check", offset_days=1),
            PlanTask(name="Dehorning", offset_days=30),
            PlanTask(name="Weaning", offset_days=90),
            PlanTask(name="Brucellosis vaccine", offset_days=120, id="brucella"),
            PlanTask(
                name="Clostridial booster", offset_days=365, id="clostridial-1", recurring=True
            ),
        ],
    )
