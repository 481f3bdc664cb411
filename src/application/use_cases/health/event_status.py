from __future__ import annotations

from collections.abc import Collection, Sequence
from datetime import date

from src.domain.models.health_event import (
    GeneratedHealthEvent,
    HealthEventStatus,
    HealthEventWithStatus,
    HealthPlanProgress,
)
from src.utils.dates import days_between

DUE_SOON_DAYS = 7


def derive_status(
    event: GeneratedHealthEvent,
    *,
    today: date,
    completed_ids: Collection[str],
    due_soon_days: int = DUE_SOON_DAYS,
) -> HealthEventWithStatus:
    """Status of a generated event given "today" and the externally tracked completions."""
    days_until_due = days_between(today, event.date)
    if event.id in completed_ids:
        status = HealthEventStatus.COMPLETED
    elif days_until_due < 0:
        status = HealthEventStatus.OVERDUE
    elif days_until_due <= due_soon_days:
        status = HealthEventStatus.DUE_SOON
    else:
        status = HealthEventStatus.PENDING
    return HealthEventWithStatus(event=event, status=status, days_until_due=days_until_due)


def with_statuses(
    events: Sequence[GeneratedHealthEvent],
    *,
    today: date,
    completed_ids: Collection[str],
    due_soon_days: int = DUE_SOON_DAYS,
) -> list[HealthEventWithStatus]:
    return [
        derive_status(e, today=today, completed_ids=completed_ids, due_soon_days=due_soon_days)
        for e in events
    ]


def summarize_progress(
    events: Sequence[GeneratedHealthEvent], completed_ids: Collection[str]
) -> HealthPlanProgress:
    total = len(events)
    completed = sum(1 for e in events if e.id in completed_ids)
    percent = (completed / total) * 100 if total > 0 else 0.0
    return HealthPlanProgress(total=total, completed=completed, percent=percent)
