from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.application.use_cases.reproduction import project_timeline
from src.application.use_cases.reproduction.project_timeline import (
    timeline_from_calving,
    timeline_from_pregnancy,
    timeline_from_service,
)
from src.domain.models.milestone import MilestoneKind
from src.domain.value_objects.reproduction import ReproductiveParameters, TimelineMode
from src.utils.dates import utc_midnight

CALVING_DATES = ["2023-02-28", "2024-01-10", "2024-12-31", "2025-06-15"]


def _by_kind(milestones):
    return {m.kind: m for m in milestones}


def test_calving_example_crosses_leap_day():
    milestones = timeline_from_calving("2024-01-10")

    assert [m.kind for m in milestones] == [
        MilestoneKind.VWP_END,
        MilestoneKind.PREDICTED_HEAT,
        MilestoneKind.PREDICTED_HEAT,
        MilestoneKind.PREDICTED_HEAT,
    ]
    assert milestones[0].date == utc_midnight("2024-02-29")
    assert [m.date for m in milestones[1:]] == [
        utc_midnight("2024-02-29"),
        utc_midnight("2024-03-21"),
        utc_midnight("2024-04-11"),
    ]


@pytest.mark.parametrize("calving", CALVING_DATES)
def test_calving_timeline_shape(calving):
    milestones = timeline_from_calving(calving)

    assert len(milestones) == 4
    dates = [m.date for m in milestones]
    assert dates == sorted(dates)
    heats = dates[1:]
    assert all(b - a == timedelta(days=21) for a, b in zip(heats, heats[1:]))
    assert all(m.justification for m in milestones)


def test_calving_timeline_uses_caller_vwp():
    params = ReproductiveParameters(voluntary_waiting_days=60)
    milestones = timeline_from_calving("2024-01-10", params)
    assert milestones[0].date == utc_midnight("2024-03-10")
    assert "60 days" in milestones[0].justification


def test_service_example():
    by_kind = _by_kind(timeline_from_service("2024-03-01"))

    assert by_kind[MilestoneKind.RETURN_TO_HEAT].date == utc_midnight("2024-03-22")
    assert by_kind[MilestoneKind.PREGNANCY_CHECK].date == utc_midnight("2024-04-05")
    assert by_kind[MilestoneKind.DUE_DATE].date == utc_midnight("2024-12-09")
    assert by_kind[MilestoneKind.DRY_OFF].date == utc_midnight("2024-10-10")


@pytest.mark.parametrize("service", CALVING_DATES)
def test_service_gestation_arithmetic(service):
    milestones = timeline_from_service(service)
    by_kind = _by_kind(milestones)

    due = by_kind[MilestoneKind.DUE_DATE].date
    assert (due - utc_midnight(service)).days == 283
    assert by_kind[MilestoneKind.DRY_OFF].date == due - timedelta(days=60)
    dates = [m.date for m in milestones]
    assert dates == sorted(dates)


@pytest.mark.parametrize("gestation_days", [1, 35, 90, 200])
def test_pregnancy_matches_service_from_inferred_date(gestation_days):
    confirmation = date(2024, 6, 1)
    inferred_service = confirmation - timedelta(days=gestation_days)

    from_pregnancy = _by_kind(timeline_from_pregnancy(confirmation.isoformat(), gestation_days))
    from_service = _by_kind(timeline_from_service(inferred_service.isoformat()))

    assert from_pregnancy[MilestoneKind.ESTIMATED_SERVICE].date == utc_midnight(inferred_service)
    for kind in (MilestoneKind.DUE_DATE, MilestoneKind.DRY_OFF):
        assert from_pregnancy[kind].date == from_service[kind].date


@pytest.mark.parametrize("gestation_days", [None, 0, -10])
def test_pregnancy_requires_positive_gestation_days(gestation_days):
    assert timeline_from_pregnancy("2024-06-01", gestation_days) == []


@pytest.mark.parametrize(
    "anchor", [None, "", "2024-13-01", "yesterday", "2024-03-01 garbage", "20240301"]
)
def test_unparsable_anchor_yields_no_milestones(anchor):
    assert timeline_from_calving(anchor) == []
    assert timeline_from_service(anchor) == []
    assert timeline_from_pregnancy(anchor, 40) == []


def test_execute_dispatches_by_mode_and_overrides_vwp():
    milestones = project_timeline.execute(
        project_timeline.ProjectTimelineInput(
            mode=TimelineMode.CALVING,
            anchor_date="2024-01-10",
            voluntary_waiting_days=45,
        )
    )
    assert milestones[0].date == utc_midnight("2024-02-24")

    milestones = project_timeline.execute(
        project_timeline.ProjectTimelineInput(
            mode="pregnancy", anchor_date="2024-06-01", gestation_days_at_confirmation=40
        )
    )
    assert [m.kind for m in milestones] == [
        MilestoneKind.ESTIMATED_SERVICE,
        MilestoneKind.DRY_OFF,
        MilestoneKind.DUE_DATE,
    ]


def test_timeline_is_deterministic():
    assert timeline_from_service("2024-03-01") == timeline_from_service("2024-03-01")
