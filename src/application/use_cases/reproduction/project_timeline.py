from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime

from src.domain.models.milestone import MilestoneKind, ReproductiveMilestone
from src.domain.value_objects.reproduction import (
    PREDICTED_HEATS,
    ReproductiveParameters,
    TimelineMode,
)
from src.utils.dates import add_days, sub_days, utc_midnight

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS = ReproductiveParameters()

_ORDINALS = ("1st", "2nd", "3rd")

_HEAT_NOTES = (
    "First insemination opportunity after calving.",
    "Second opportunity if the first heat was missed or not served.",
    "Third opportunity. Watch closely.",
)


@dataclass
class ProjectTimelineInput:
    mode: TimelineMode
    anchor_date: str | date | None
    gestation_days_at_confirmation: int | None = None
    voluntary_waiting_days: int | None = None


def timeline_from_calving(
    calving_date: str | date | None,
    params: ReproductiveParameters = DEFAULT_PARAMETERS,
) -> list[ReproductiveMilestone]:
    """VWP end plus the first three predicted heats after calving."""
    calving = utc_midnight(calving_date)
    if calving is None:
        logger.debug("Skipping calving timeline: unparsable anchor %r", calving_date)
        return []

    vwp_end = add_days(calving, params.voluntary_waiting_days)
    milestones = [
        ReproductiveMilestone(
            kind=MilestoneKind.VWP_END,
            title="End of voluntary waiting period",
            date=vwp_end,
            justification=(
                f"{params.voluntary_waiting_days} days after calving. The cow is ready "
                "for first service; start intensive heat detection."
            ),
        )
    ]
    for i in range(PREDICTED_HEATS):
        milestones.append(
            ReproductiveMilestone(
                kind=MilestoneKind.PREDICTED_HEAT,
                title=f"{_ORDINALS[i]} predicted heat",
                date=add_days(vwp_end, i * params.estrous_cycle_days),
                justification=_HEAT_NOTES[i],
            )
        )
    return milestones


def _gestation_milestones(
    service: datetime, params: ReproductiveParameters
) -> list[ReproductiveMilestone]:
    return [
        ReproductiveMilestone(
            kind=MilestoneKind.DRY_OFF,
            title="Dry-off date",
            date=add_days(service, params.dry_off_offset_days),
            justification=(
                f"{params.dry_off_days} days before the expected calving. Start the dry "
                "period to prepare the cow for calving."
            ),
        ),
        ReproductiveMilestone(
            kind=MilestoneKind.DUE_DATE,
            title="Expected calving date",
            date=add_days(service, params.gestation_days),
            justification=(
                f"{params.gestation_days} days of gestation after service. Prepare the "
                "maternity pen and peripartum care."
            ),
        ),
    ]


def timeline_from_service(
    service_date: str | date | None,
    params: ReproductiveParameters = DEFAULT_PARAMETERS,
) -> list[ReproductiveMilestone]:
    """Return-to-heat check, pregnancy check, dry-off and due date after a service."""
    service = utc_midnight(service_date)
    if service is None:
        logger.debug("Skipping service timeline: unparsable anchor %r", service_date)
        return []

    return [
        ReproductiveMilestone(
            kind=MilestoneKind.RETURN_TO_HEAT,
            title="Watch for return to heat",
            date=add_days(service, params.estrous_cycle_days),
            justification=(
                f"One estrous cycle ({params.estrous_cycle_days} days) after service. "
                "No heat is a good sign of pregnancy."
            ),
        ),
        ReproductiveMilestone(
            kind=MilestoneKind.PREGNANCY_CHECK,
            title="Pregnancy check",
            date=add_days(service, params.pregnancy_check_days),
            justification=(
                f"{params.pregnancy_check_days} days after service. Confirm gestation by "
                "palpation or ultrasound."
            ),
        ),
        *_gestation_milestones(service, params),
    ]


def timeline_from_pregnancy(
    confirmation_date: str | date | None,
    gestation_days: int | None,
    params: ReproductiveParameters = DEFAULT_PARAMETERS,
) -> list[ReproductiveMilestone]:
    """Back-compute the service date from a confirmed pregnancy and project forward."""
    confirmation = utc_midnight(confirmation_date)
    if confirmation is None:
        logger.debug("Skipping pregnancy timeline: unparsable anchor %r", confirmation_date)
        return []
    if gestation_days is None or gestation_days <= 0:
        logger.debug("Skipping pregnancy timeline: gestation days %r", gestation_days)
        return []

    service = sub_days(confirmation, gestation_days)
    return [
        ReproductiveMilestone(
            kind=MilestoneKind.ESTIMATED_SERVICE,
            title="Estimated service date",
            date=service,
            justification=(
                f"Computed by subtracting {gestation_days} days of gestation from the "
                "confirmation date."
            ),
        ),
        *_gestation_milestones(service, params),
    ]


def execute(
    payload: ProjectTimelineInput,
    params: ReproductiveParameters = DEFAULT_PARAMETERS,
) -> list[ReproductiveMilestone]:
    if payload.voluntary_waiting_days is not None:
        params = replace(params, voluntary_waiting_days=payload.voluntary_waiting_days)

    mode = TimelineMode(payload.mode)
    if mode is TimelineMode.CALVING:
        return timeline_from_calving(payload.anchor_date, params)
    if mode is TimelineMode.SERVICE:
        return timeline_from_service(payload.anchor_date, params)
    return timeline_from_pregnancy(
        payload.anchor_date, payload.gestation_days_at_confirmation, params
    )
