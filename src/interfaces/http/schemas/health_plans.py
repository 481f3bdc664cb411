from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.health_event import HealthEventStatus
from src.domain.models.health_plan import HealthPlanTemplate, PlanAnchor, PlanTask
from src.interfaces.http.schemas.animals import AnimalIn


class PlanTaskIn(BaseModel):
    name: str = Field(min_length=1)
    offset_days: int = Field(ge=0)
    id: str | None = None
    recurring: bool = False


class HealthPlanIn(BaseModel):
    id: str
    name: str
    tasks: list[PlanTaskIn] = Field(default_factory=list)
    anchor: PlanAnchor = PlanAnchor.BIRTH

    def to_template(self) -> HealthPlanTemplate:
        return HealthPlanTemplate(
            id=self.id,
            name=self.name,
            tasks=[PlanTask(**task.model_dump()) for task in self.tasks],
            anchor=self.anchor.value,
        )


class HealthEventsRequest(BaseModel):
    animal: AnimalIn
    plan: HealthPlanIn
    anchor_date: str | None = None
    # Statuses are only derived when the caller says what "today" is
    today: date | None = None
    completed_ids: list[str] = Field(default_factory=list)


class HealthEventResponse(BaseModel):
    id: str
    event_name: str
    date: datetime
    source_task_id: str
    animal_id: str
    animal_name: str | None = None
    status: HealthEventStatus | None = None
    days_until_due: int | None = None


class ProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    completed: int
    percent: float


class HealthEventsResponse(BaseModel):
    items: list[HealthEventResponse]
    progress: ProgressResponse


class AttentionRequest(BaseModel):
    animals: list[AnimalIn]
    plans: list[HealthPlanIn]
    completed_ids: list[str] = Field(default_factory=list)
    today: date | None = None


class AttentionResponse(BaseModel):
    items: list[HealthEventResponse]
