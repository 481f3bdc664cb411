from __future__ import annotations

from datetime import date

from src.application.use_cases.reproduction import animal_summary
from src.domain.models.animal import AnimalRecord
from src.utils.dates import AnimalAge


def test_female_summary(cow):
    summary = animal_summary.execute(cow, today=date(2024, 3, 1))

    assert summary.birth_date == date(2020, 5, 15)
    assert summary.age == AnimalAge(years=3, months=9, days=1386)
    assert summary.last_calving_date == date(2024, 1, 10)
    assert summary.heat_date == date(2024, 3, 1)
    assert summary.pregnancy_date is None


def test_male_summary_omits_reproductive_dates():
    bull = AnimalRecord(id="200", sex="male", birth_date="bad", heat_date="2024-01-01")
    summary = animal_summary.execute(bull, today=date(2024, 3, 1))

    assert summary.birth_date is None
    assert summary.age is None
    assert summary.heat_date is None
