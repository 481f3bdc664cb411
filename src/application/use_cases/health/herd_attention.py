from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass
from datetime import date

from src.application.use_cases.health import event_status, generate_health_events
from src.domain.models.animal import AnimalRecord
from src.domain.models.health_event import HealthEventStatus, HealthEventWithStatus
from src.domain.models.health_plan import HealthPlanTemplate

logger = logging.getLogger(__name__)

ATTENTION_STATUSES = (HealthEventStatus.OVERDUE, HealthEventStatus.DUE_SOON)


@dataclass
class HerdAttentionInput:
    animals: list[AnimalRecord]
    plans: Mapping[str, HealthPlanTemplate]
    today: date
    completed_ids: Collection[str] = frozenset()
    default_plan_id: str | None = None
    due_soon_days: int = event_status.DUE_SOON_DAYS


def _animal_attention(
    animal: AnimalRecord, payload: HerdAttentionInput
) -> list[HealthEventWithStatus]:
    plan_id = animal.assigned_health_plan or payload.default_plan_id
    plan = payload.plans.get(plan_id) if plan_id else None
    if plan is None:
        logger.info("Animal %s skipped: health plan %r not in catalog", animal.id, plan_id)
        return []
    events = generate_health_events.execute(animal, plan)
    return [
        item
        for item in event_status.with_statuses(
            events,
            today=payload.today,
            completed_ids=payload.completed_ids,
            due_soon_days=payload.due_soon_days,
        )
        if item.status in ATTENTION_STATUSES
    ]


def execute(payload: HerdAttentionInput) -> list[HealthEventWithStatus]:
    """Overdue and due-soon health events across a herd, earliest first.

    Each animal is evaluated on its own; nothing is shared between animals.
    """
    items: list[HealthEventWithStatus] = []
    for animal in _active(payload.animals):
        items.extend(_animal_attention(animal, payload))
    return sorted(items, key=lambda item: (item.event.date, item.event.id))


def _active(animals: Iterable[AnimalRecord]) -> Iterable[AnimalRecord]:
    return (a for a in animals if a.is_active)
