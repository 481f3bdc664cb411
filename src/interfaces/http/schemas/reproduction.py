from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.models.milestone import MilestoneKind
from src.domain.models.reproductive_event import ReproductiveEventType
from src.domain.value_objects.reproduction import TimelineMode
from src.interfaces.http.schemas.animals import AnimalIn

_ANCHOR_FIELDS = {
    "calving_date": TimelineMode.CALVING,
    "service_date": TimelineMode.SERVICE,
    "confirmation_date": TimelineMode.PREGNANCY,
}


class TimelineRequest(BaseModel):
    calving_date: str | None = None
    service_date: str | None = None
    confirmation_date: str | None = None
    gestation_days_at_confirmation: int | None = None
    voluntary_waiting_days: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_single_anchor(self) -> TimelineRequest:
        supplied = [name for name in _ANCHOR_FIELDS if getattr(self, name) is not None]
        if len(supplied) != 1:
            raise ValueError(
                "Provide exactly one of calving_date, service_date or confirmation_date"
            )
        return self

    def _selected_anchor(self) -> tuple[TimelineMode, str]:
        for name, mode in _ANCHOR_FIELDS.items():
            value = getattr(self, name)
            if value is not None:
                return mode, value
        raise AssertionError("validated request without anchor")

    @property
    def mode(self) -> TimelineMode:
        return self._selected_anchor()[0]

    @property
    def anchor_date(self) -> str:
        return self._selected_anchor()[1]


class MilestoneResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: MilestoneKind
    title: str
    date: datetime
    justification: str


class TimelineResponse(BaseModel):
    mode: TimelineMode
    milestones: list[MilestoneResponse]


class CalendarRequest(BaseModel):
    animals: list[AnimalIn]
    today: date | None = None
    mode: TimelineMode | None = None
    animal_id: str | None = None
    include_birthdays: bool = True


class ReproductiveEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    animal_id: str
    animal_name: str | None
    event_type: ReproductiveEventType
    date: datetime


class CalendarResponse(BaseModel):
    items: list[ReproductiveEventResponse]


class SummaryRequest(BaseModel):
    animal: AnimalIn
    today: date | None = None


class AgeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    years: int
    months: int
    days: int


class AnimalSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal_id: str
    name: str | None
    birth_date: date | None
    age: AgeResponse | None
    last_calving_date: date | None = None
    heat_date: date | None = None
    pregnancy_date: date | None = None
