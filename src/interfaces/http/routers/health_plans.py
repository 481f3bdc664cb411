from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.application.use_cases.health import event_status, generate_health_events, herd_attention
from src.config.settings import Settings
from src.domain.models.health_event import GeneratedHealthEvent, HealthEventWithStatus
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.schemas.health_plans import (
    AttentionRequest,
    AttentionResponse,
    HealthEventResponse,
    HealthEventsRequest,
    HealthEventsResponse,
    ProgressResponse,
)

router = APIRouter(prefix="/health-plans", tags=["health-plans"])


def _to_response(
    event: GeneratedHealthEvent, item: HealthEventWithStatus | None = None
) -> HealthEventResponse:
    return HealthEventResponse(
        id=event.id,
        event_name=event.event_name,
        date=event.date,
        source_task_id=event.source_task_id,
        animal_id=event.animal_id,
        animal_name=event.animal_name,
        status=item.status if item else None,
        days_until_due=item.days_until_due if item else None,
    )


@router.post("/events", response_model=HealthEventsResponse)
async def generate_health_events_endpoint(
    payload: HealthEventsRequest,
    settings: Settings = Depends(get_app_settings),
) -> HealthEventsResponse:
    """Expand a health plan into dated events for one animal.

    When `today` is given each event also carries its status; completion marks are
    matched by event id against `completed_ids`.
    """
    events = generate_health_events.execute(
        payload.animal.to_record(),
        payload.plan.to_template(),
        anchor_date=payload.anchor_date,
    )
    completed = set(payload.completed_ids)

    if payload.today is None:
        items = [_to_response(e) for e in events]
    else:
        items = [
            _to_response(item.event, item)
            for item in event_status.with_statuses(
                events,
                today=payload.today,
                completed_ids=completed,
                due_soon_days=settings.due_soon_days,
            )
        ]

    progress = event_status.summarize_progress(events, completed)
    return HealthEventsResponse(items=items, progress=ProgressResponse.model_validate(progress))


@router.post("/attention", response_model=AttentionResponse)
async def herd_attention_endpoint(
    payload: AttentionRequest,
    settings: Settings = Depends(get_app_settings),
) -> AttentionResponse:
    items = herd_attention.execute(
        herd_attention.HerdAttentionInput(
            animals=[a.to_record() for a in payload.animals],
            plans={p.id: p.to_template() for p in payload.plans},
            today=payload.today or datetime.now(timezone.utc).date(),
            completed_ids=set(payload.completed_ids),
            default_plan_id=settings.default_health_plan_id,
            due_soon_days=settings.due_soon_days,
        )
    )
    return AttentionResponse(items=[_to_response(item.event, item) for item in items])
