from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class HealthEventStatus(str, Enum):
    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class GeneratedHealthEvent:
    id: str
    event_name: str
    date: datetime  # UTC midnight
    source_task_id: str
    animal_id: str
    animal_name: str | None = None


@dataclass(frozen=True, slots=True)
class HealthEventWithStatus:
    event: GeneratedHealthEvent
    status: HealthEventStatus
    days_until_due: int


@dataclass(frozen=True, slots=True)
class HealthPlanProgress:
    total: int
    completed: int
    percent: float
