from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.domain.models.animal import AnimalRecord
from src.utils.dates import AnimalAge, calculate_age, parse_iso_date


@dataclass(slots=True)
class AnimalSummary:
    animal_id: str
    name: str | None
    birth_date: date | None
    age: AnimalAge | None
    last_calving_date: date | None = None
    heat_date: date | None = None
    pregnancy_date: date | None = None


def execute(animal: AnimalRecord, *, today: date) -> AnimalSummary:
    """Key milestones of one animal. Reproductive dates are reported for females only."""
    summary = AnimalSummary(
        animal_id=animal.id,
        name=animal.name,
        birth_date=parse_iso_date(animal.birth_date),
        age=calculate_age(animal.birth_date, today),
    )
    if animal.is_female:
        summary.last_calving_date = parse_iso_date(animal.last_calving_date)
        summary.heat_date = parse_iso_date(animal.heat_date)
        summary.pregnancy_date = parse_iso_date(animal.pregnancy_date)
    return summary
