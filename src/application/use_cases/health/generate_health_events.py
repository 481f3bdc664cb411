from __future__ import annotations

import logging
from datetime import date

from src.domain.models.animal import AnimalRecord
from src.domain.models.health_event import GeneratedHealthEvent
from src.domain.models.health_plan import HealthPlanTemplate, PlanAnchor
from src.utils.dates import add_days, utc_midnight

logger = logging.getLogger(__name__)


def resolve_anchor(animal: AnimalRecord, plan: HealthPlanTemplate) -> str | None:
    if plan.anchor == PlanAnchor.LAST_CALVING.value:
        return animal.last_calving_date
    return animal.birth_date


def execute(
    animal: AnimalRecord,
    plan: HealthPlanTemplate,
    *,
    anchor_date: str | date | None = None,
) -> list[GeneratedHealthEvent]:
    """Expand a health plan into dated events for one animal.

    Event ids depend only on the animal id and the task id, so completion marks
    stored elsewhere survive regeneration. Events are sorted by date; tasks on
    the same day keep their plan order.
    """
    raw_anchor = anchor_date if anchor_date is not None else resolve_anchor(animal, plan)
    anchor = utc_midnight(raw_anchor)
    if anchor is None:
        logger.debug(
            "No health events for animal %s: plan %s has no usable anchor (%r)",
            animal.id,
            plan.id,
            raw_anchor,
        )
        return []

    events: list[GeneratedHealthEvent] = []
    for task in plan.tasks:
        if task.offset_days < 0:
            logger.debug("Skipping task %r of plan %s: negative offset", task.name, plan.id)
            continue
        events.append(
            GeneratedHealthEvent(
                id=f"{animal.id}-{task.task_id}",
                event_name=task.name,
                date=add_days(anchor, task.offset_days),
                source_task_id=task.task_id,
                animal_id=animal.id,
                animal_name=animal.name,
            )
        )
    # sorted() is stable, so same-day tasks keep plan order
    return sorted(events, key=lambda e: e.date)
