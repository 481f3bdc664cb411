from __future__ import annotations

from pydantic import BaseModel, Field

from src.domain.models.animal import AnimalRecord


class AnimalIn(BaseModel):
    id: str = Field(min_length=1)
    name: str | None = None
    sex: str | None = None
    # ISO dates stay strings: a malformed value means "no data", not a bad request
    birth_date: str | None = None
    category: str | None = None
    status: str = "active"
    last_calving_date: str | None = None
    heat_date: str | None = None
    pregnancy_date: str | None = None
    gestation_days_at_confirmation: int | None = None
    assigned_health_plan: str | None = None

    def to_record(self) -> AnimalRecord:
        return AnimalRecord(**self.model_dump())
