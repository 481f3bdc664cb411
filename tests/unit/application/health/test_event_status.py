from __future__ import annotations

from datetime import date

import pytest

from src.application.use_cases.health import event_status
from src.domain.models.health_event import GeneratedHealthEvent, HealthEventStatus
from src.utils.dates import utc_midnight

TODAY = date(2024, 3, 1)


def _event(event_id: str, when: str) -> GeneratedHealthEvent:
    return GeneratedHealthEvent(
        id=event_id,
        event_name=event_id,
        date=utc_midnight(when),
        source_task_id=event_id,
        animal_id="104",
    )


@pytest.mark.parametrize(
    ("when", "expected", "days"),
    [
        ("2024-02-29", HealthEventStatus.OVERDUE, -1),
        ("2024-03-01", HealthEventStatus.DUE_SOON, 0),
        ("2024-03-08", HealthEventStatus.DUE_SOON, 7),
        ("2024-03-09", HealthEventStatus.PENDING, 8),
    ],
)
def test_status_by_date(when, expected, days):
    item = event_status.derive_status(_event("e", when), today=TODAY, completed_ids=set())
    assert item.status is expected
    assert item.days_until_due == days


def test_completed_wins_over_overdue():
    item = event_status.derive_status(
        _event("104-dehorning", "2024-01-31"), today=TODAY, completed_ids={"104-dehorning"}
    )
    assert item.status is HealthEventStatus.COMPLETED


def test_custom_due_soon_window():
    item = event_status.derive_status(
        _event("e", "2024-03-09"), today=TODAY, completed_ids=(), due_soon_days=14
    )
    assert item.status is HealthEventStatus.DUE_SOON


def test_summarize_progress():
    events = [
        _event("a", "2024-01-01"),
        _event("b", "2024-02-01"),
        _event("c", "2024-03-01"),
        _event("d", "2024-04-01"),
    ]
    progress = event_status.summarize_progress(events, {"a", "c", "unknown"})
    assert (progress.total, progress.completed, progress.percent) == (4, 2, 50.0)

    empty = event_status.summarize_progress([], {"a"})
    assert (empty.total, empty.completed, empty.percent) == (0, 0, 0.0)
