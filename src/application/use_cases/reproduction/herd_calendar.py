from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from src.domain.models.animal import AnimalRecord
from src.domain.models.reproductive_event import ReproductiveEvent, ReproductiveEventType
from src.domain.value_objects.reproduction import (
    PREDICTED_HEATS,
    ReproductiveParameters,
    TimelineMode,
)
from src.utils.dates import add_days, next_anniversary, parse_iso_date, sub_days, utc_midnight

logger = logging.getLogger(__name__)


def _event(
    animal: AnimalRecord, suffix: str, event_type: ReproductiveEventType, when
) -> ReproductiveEvent:
    return ReproductiveEvent(
        id=f"{animal.id}-{suffix}",
        animal_id=animal.id,
        animal_name=animal.name,
        event_type=event_type,
        date=when,
    )


def _birthday(animal: AnimalRecord, today: date) -> list[ReproductiveEvent]:
    birth = parse_iso_date(animal.birth_date)
    if birth is None:
        return []
    return [
        _event(
            animal,
            "birthday",
            ReproductiveEventType.BIRTHDAY,
            utc_midnight(next_anniversary(birth, today)),
        )
    ]


def _from_calving(animal: AnimalRecord, params: ReproductiveParameters) -> list[ReproductiveEvent]:
    calving = utc_midnight(animal.last_calving_date)
    if calving is None:
        return []
    vwp_end = add_days(calving, params.voluntary_waiting_days)
    return [
        _event(
            animal,
            f"heat-{i + 1}",
            ReproductiveEventType.PREDICTED_HEAT,
            add_days(vwp_end, i * params.estrous_cycle_days),
        )
        for i in range(PREDICTED_HEATS)
    ]


def _from_service(animal: AnimalRecord, params: ReproductiveParameters) -> list[ReproductiveEvent]:
    service = utc_midnight(animal.heat_date)
    if service is None:
        return []
    events = [
        _event(
            animal,
            "return-heat",
            ReproductiveEventType.RETURN_TO_HEAT,
            add_days(service, params.estrous_cycle_days),
        ),
        _event(
            animal,
            "preg-check",
            ReproductiveEventType.PREGNANCY_CHECK,
            add_days(service, params.pregnancy_check_days),
        ),
    ]
    # A confirmed pregnancy supersedes the due date projected from the service.
    if utc_midnight(animal.pregnancy_date) is None:
        events.append(
            _event(
                animal,
                "due-date-from-heat",
                ReproductiveEventType.DUE_DATE,
                add_days(service, params.gestation_days),
            )
        )
    return events


def _from_pregnancy(
    animal: AnimalRecord, params: ReproductiveParameters
) -> list[ReproductiveEvent]:
    confirmation = utc_midnight(animal.pregnancy_date)
    if confirmation is None:
        return []
    gestation_days = animal.gestation_days_at_confirmation
    if gestation_days is None or gestation_days <= 0:
        gestation_days = params.pregnancy_check_days
    service = sub_days(confirmation, gestation_days)
    return [
        _event(
            animal,
            "dry-off",
            ReproductiveEventType.DRY_OFF,
            add_days(service, params.dry_off_offset_days),
        ),
        _event(
            animal,
            "due-date-from-preg",
            ReproductiveEventType.DUE_DATE,
            add_days(service, params.gestation_days),
        ),
    ]


def execute(
    animals: Iterable[AnimalRecord],
    *,
    today: date,
    mode: TimelineMode | str | None = None,
    animal_id: str | None = None,
    include_birthdays: bool = True,
    params: ReproductiveParameters | None = None,
) -> list[ReproductiveEvent]:
    """Herd-wide calendar of upcoming reproductive events.

    Birthdays apply to every animal; reproductive projections only to females.
    `mode` limits projections to a single anchor family and `animal_id` limits the
    calendar to one animal. Events are ordered by date, then id.
    """
    params = params or ReproductiveParameters()
    selected = TimelineMode(mode) if mode is not None else None

    events: list[ReproductiveEvent] = []
    for animal in animals:
        if animal_id is not None and animal.id != animal_id:
            continue
        if include_birthdays:
            events.extend(_birthday(animal, today))
        if not animal.is_female:
            continue
        if selected in (None, TimelineMode.CALVING):
            events.extend(_from_calving(animal, params))
        if selected in (None, TimelineMode.SERVICE):
            events.extend(_from_service(animal, params))
        if selected in (None, TimelineMode.PREGNANCY):
            events.extend(_from_pregnancy(animal, params))

    logger.debug("Reproductive calendar built with %d events", len(events))
    return sorted(events, key=lambda e: (e.date, e.id))
