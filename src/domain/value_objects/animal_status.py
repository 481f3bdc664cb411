from __future__ import annotations

from enum import Enum


class AnimalStatus(str, Enum):
    ACTIVE = "active"
    SOLD = "sold"
    DEAD = "dead"


# Dashboard records store the Spanish label.
_ACTIVE_ALIASES = {AnimalStatus.ACTIVE.value, "activo"}


def is_active(status: str | None) -> bool:
    if not status:
        return False
    return status.strip().lower() in _ACTIVE_ALIASES
