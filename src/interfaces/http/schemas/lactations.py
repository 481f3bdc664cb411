from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.milk_weighing import MilkingSession, MilkWeighingRecord
from src.interfaces.http.schemas.animals import AnimalIn


class MilkRecordIn(BaseModel):
    animal_id: str
    date: str
    quantity: float = Field(ge=0)
    session: MilkingSession = MilkingSession.SINGLE
    id: str | None = None

    def to_record(self) -> MilkWeighingRecord:
        return MilkWeighingRecord(
            animal_id=self.animal_id,
            date=self.date,
            quantity=self.quantity,
            session=self.session.value,
            id=self.id,
        )


class LactationAnalysisRequest(BaseModel):
    animal: AnimalIn
    records: list[MilkRecordIn] = Field(default_factory=list)


class CurvePointResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    days_in_milk: int
    production: float


class LactationAnalysisResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    data: list[CurvePointResponse]
    peak_production: float
    total_production: float
    persistency: float
    projected_305_day_production: float
    peak_days_in_milk: int
    days_in_milk: int
    average_daily_production: float


class LactationAnalysisEnvelope(BaseModel):
    animal_id: str
    analysis: LactationAnalysisResponse | None = None
