from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

_SLUG_SEPARATORS = re.compile(r"\s+")


class PlanAnchor(str, Enum):
    BIRTH = "birth"
    LAST_CALVING = "last_calving"


def slugify_task_name(name: str) -> str:
    return _SLUG_SEPARATORS.sub("-", name.strip().lower())


@dataclass(slots=True)
class PlanTask:
    name: str
    offset_days: int
    id: str | None = None
    # Recurring tasks (e.g. yearly boosters) are listed once per occurrence.
    recurring: bool = False

    @property
    def task_id(self) -> str:
        return self.id or slugify_task_name(self.name)


@dataclass(slots=True)
class HealthPlanTemplate:
    id: str
    name: str
    tasks: list[PlanTask] = field(default_factory=list)
    anchor: str = PlanAnchor.BIRTH.value
