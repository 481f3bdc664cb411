from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ReproductiveEventType(str, Enum):
    BIRTHDAY = "birthday"
    PREDICTED_HEAT = "predicted_heat"
    RETURN_TO_HEAT = "return_to_heat"
    PREGNANCY_CHECK = "pregnancy_check"
    DRY_OFF = "dry_off"
    DUE_DATE = "due_date"


@dataclass(frozen=True, slots=True)
class ReproductiveEvent:
    id: str
    animal_id: str
    animal_name: str | None
    event_type: ReproductiveEventType
    date: datetime  # UTC midnight
