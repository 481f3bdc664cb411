from __future__ import annotations

from enum import Enum


class AnimalSex(str, Enum):
    FEMALE = "female"
    MALE = "male"


# Values recorded by the dashboard forms (es) next to the canonical ones.
_FEMALE_ALIASES = {AnimalSex.FEMALE.value, "f", "hembra"}


def is_female(sex: str | None) -> bool:
    if not sex:
        return False
    return sex.strip().lower() in _FEMALE_ALIASES
