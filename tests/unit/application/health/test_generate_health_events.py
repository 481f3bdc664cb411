from __future__ import annotations

from dataclasses import replace

from src.application.use_cases.health import generate_health_events
from src.domain.models.animal import AnimalRecord
from src.domain.models.health_plan import HealthPlanTemplate, PlanAnchor, PlanTask
from src.utils.dates import utc_midnight

CALF = AnimalRecord(
    id="104", name="Luna", sex="female", birth_date="2024-01-01", category="calf_female"
)


def test_events_are_dated_from_birth_with_stable_ids(calf_plan):
    events = generate_health_events.execute(CALF, calf_plan)

    assert [(e.id, e.date) for e in events] == [
        ("104-colostrum-check", utc_midnight("2024-01-02")),
        ("104-dehorning", utc_midnight("2024-01-31")),
        ("104-weaning", utc_midnight("2024-03-31")),
        ("104-brucella", utc_midnight("2024-04-30")),
        ("104-clostridial-1", utc_midnight("2024-12-31")),
    ]
    assert events[1].source_task_id == "dehorning"
    assert events[1].event_name == "Dehorning"
    assert all(e.animal_name == "Luna" for e in events)


def test_regeneration_is_idempotent(calf_plan):
    first = generate_health_events.execute(CALF, calf_plan)
    reloaded_plan = replace(calf_plan, tasks=[replace(t) for t in calf_plan.tasks])
    second = generate_health_events.execute(CALF, reloaded_plan)

    assert [(e.id, e.date) for e in first] == [(e.id, e.date) for e in second]


def test_events_sorted_by_date_with_plan_order_on_ties():
    plan = HealthPlanTemplate(
        id="p",
        name="Unordered",
        tasks=[
            PlanTask(name="Late", offset_days=60),
            PlanTask(name="Deworm", offset_days=10),
            PlanTask(name="Vitamins", offset_days=10),
        ],
    )
    events = generate_health_events.execute(CALF, plan)
    assert [e.event_name for e in events] == ["Deworm", "Vitamins", "Late"]


def test_post_calving_plan_anchors_at_last_calving():
    cow = AnimalRecord(id="101", birth_date="2019-01-01", last_calving_date="2024-01-10")
    plan = HealthPlanTemplate(
        id="fresh-cow",
        name="Fresh cow",
        tasks=[PlanTask(name="Uterine check", offset_days=30)],
        anchor=PlanAnchor.LAST_CALVING.value,
    )
    events = generate_health_events.execute(cow, plan)
    assert events[0].date == utc_midnight("2024-02-09")


def test_explicit_anchor_wins(calf_plan):
    events = generate_health_events.execute(CALF, calf_plan, anchor_date="2024-02-01")
    assert events[0].date == utc_midnight("2024-02-02")


def test_missing_or_bad_anchor_yields_nothing(calf_plan):
    assert generate_health_events.execute(AnimalRecord(id="1"), calf_plan) == []
    bad_birth_date = AnimalRecord(id="1", birth_date="01/02/2024")
    assert generate_health_events.execute(bad_birth_date, calf_plan) == []


def test_negative_offsets_are_skipped():
    plan = HealthPlanTemplate(
        id="p",
        name="p",
        tasks=[PlanTask(name="Before birth", offset_days=-5), PlanTask(name="Tag", offset_days=2)],
    )
    assert [e.id for e in generate_health_events.execute(CALF, plan)] == ["104-tag"]
