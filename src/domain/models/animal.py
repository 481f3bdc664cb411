from __future__ import annotations

from dataclasses import dataclass

from src.domain.value_objects.animal_sex import is_female
from src.domain.value_objects.animal_status import is_active


@dataclass(slots=True)
class AnimalRecord:
    """Read-only animal snapshot handed over by the record store.

    Dates are kept as the ISO `YYYY-MM-DD` strings the store holds; engines parse
    them on use and treat unparsable values as missing.
    """

    id: str
    name: str | None = None
    sex: str | None = None
    birth_date: str | None = None
    category: str | None = None
    status: str = "active"
    last_calving_date: str | None = None
    heat_date: str | None = None
    pregnancy_date: str | None = None
    gestation_days_at_confirmation: int | None = None
    assigned_health_plan: str | None = None

    @property
    def is_female(self) -> bool:
        return is_female(self.sex)

    @property
    def is_active(self) -> bool:
        return is_active(self.status)
