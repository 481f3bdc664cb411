from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MilestoneKind(str, Enum):
    VWP_END = "vwp_end"
    PREDICTED_HEAT = "predicted_heat"
    RETURN_TO_HEAT = "return_to_heat"
    PREGNANCY_CHECK = "pregnancy_check"
    ESTIMATED_SERVICE = "estimated_service"
    DRY_OFF = "dry_off"
    DUE_DATE = "due_date"


@dataclass(frozen=True, slots=True)
class ReproductiveMilestone:
    kind: MilestoneKind
    title: str
    date: datetime  # UTC midnight
    justification: str
