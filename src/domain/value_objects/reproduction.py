from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

GESTATION_DAYS = 283
ESTROUS_CYCLE_DAYS = 21
VOLUNTARY_WAITING_DAYS = 50
PREGNANCY_CHECK_DAYS = 35
DRY_OFF_DAYS = 60
PREDICTED_HEATS = 3


@dataclass(frozen=True, slots=True)
class ReproductiveParameters:
    """Physiological constants used to project reproductive milestones.

    Only the voluntary waiting period is a management decision; the rest are
    standard bovine averages.
    """

    gestation_days: int = GESTATION_DAYS
    estrous_cycle_days: int = ESTROUS_CYCLE_DAYS
    voluntary_waiting_days: int = VOLUNTARY_WAITING_DAYS
    pregnancy_check_days: int = PREGNANCY_CHECK_DAYS
    dry_off_days: int = DRY_OFF_DAYS

    @property
    def dry_off_offset_days(self) -> int:
        """Days from service to dry-off."""
        return self.gestation_days - self.dry_off_days


class TimelineMode(str, Enum):
    CALVING = "calving"
    SERVICE = "service"
    PREGNANCY = "pregnancy"
