from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.application.errors import NotFound
from src.application.use_cases.reproduction import animal_summary, herd_calendar, project_timeline
from src.domain.value_objects.reproduction import ReproductiveParameters
from src.interfaces.http.deps import get_reproductive_parameters
from src.interfaces.http.schemas.reproduction import (
    AnimalSummaryResponse,
    CalendarRequest,
    CalendarResponse,
    MilestoneResponse,
    ReproductiveEventResponse,
    SummaryRequest,
    TimelineRequest,
    TimelineResponse,
)

router = APIRouter(prefix="/reproduction", tags=["reproduction"])


@router.post("/timeline", response_model=TimelineResponse)
async def project_timeline_endpoint(
    payload: TimelineRequest,
    params: ReproductiveParameters = Depends(get_reproductive_parameters),
) -> TimelineResponse:
    """Project reproductive milestones from a single anchor date.

    An empty `milestones` list means the anchor could not be used.
    """
    milestones = project_timeline.execute(
        project_timeline.ProjectTimelineInput(
            mode=payload.mode,
            anchor_date=payload.anchor_date,
            gestation_days_at_confirmation=payload.gestation_days_at_confirmation,
            voluntary_waiting_days=payload.voluntary_waiting_days,
        ),
        params,
    )
    return TimelineResponse(
        mode=payload.mode,
        milestones=[MilestoneResponse.model_validate(m) for m in milestones],
    )


@router.post("/calendar", response_model=CalendarResponse)
async def herd_calendar_endpoint(
    payload: CalendarRequest,
    params: ReproductiveParameters = Depends(get_reproductive_parameters),
) -> CalendarResponse:
    if payload.animal_id is not None and all(a.id != payload.animal_id for a in payload.animals):
        raise NotFound(f"Animal {payload.animal_id} not found")

    events = herd_calendar.execute(
        [a.to_record() for a in payload.animals],
        today=payload.today or datetime.now(timezone.utc).date(),
        mode=payload.mode,
        animal_id=payload.animal_id,
        include_birthdays=payload.include_birthdays,
        params=params,
    )
    return CalendarResponse(
        items=[ReproductiveEventResponse.model_validate(e) for e in events]
    )


@router.post("/summary", response_model=AnimalSummaryResponse)
async def animal_summary_endpoint(payload: SummaryRequest) -> AnimalSummaryResponse:
    summary = animal_summary.execute(
        payload.animal.to_record(),
        today=payload.today or datetime.now(timezone.utc).date(),
    )
    return AnimalSummaryResponse.model_validate(summary)
