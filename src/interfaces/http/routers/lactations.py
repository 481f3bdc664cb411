from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.lactation import analyze_lactation
from src.config.settings import Settings
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.schemas.lactations import (
    LactationAnalysisEnvelope,
    LactationAnalysisRequest,
    LactationAnalysisResponse,
)

router = APIRouter(prefix="/lactation", tags=["lactation"])


@router.post("/analysis", response_model=LactationAnalysisEnvelope)
async def analyze_lactation_endpoint(
    payload: LactationAnalysisRequest,
    settings: Settings = Depends(get_app_settings),
) -> LactationAnalysisEnvelope:
    """Lactation curve and KPIs for the animal's current lactation.

    Returns:
    - Daily production by days in milk (AM/PM summed)
    - Peak and cumulative production
    - Persistency (latest days vs days around peak, %)
    - Linear 305-day projection

    `analysis` is null when there is no last calving date or no usable record.
    """
    analysis = analyze_lactation.execute(
        payload.animal.to_record(),
        [r.to_record() for r in payload.records],
        standard_days=settings.lactation_standard_days,
        window=settings.persistency_window_days,
    )
    return LactationAnalysisEnvelope(
        animal_id=payload.animal.id,
        analysis=LactationAnalysisResponse.model_validate(analysis) if analysis else None,
    )
