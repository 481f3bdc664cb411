from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MilkingSession(str, Enum):
    AM = "AM"
    PM = "PM"
    SINGLE = "single"


@dataclass(slots=True)
class MilkWeighingRecord:
    animal_id: str
    date: str  # YYYY-MM-DD
    quantity: float  # litres
    session: str = MilkingSession.SINGLE.value
    id: str | None = None
