from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LactationCurvePoint:
    days_in_milk: int
    production: float


@dataclass(slots=True)
class LactationAnalysis:
    data: list[LactationCurvePoint] = field(default_factory=list)
    peak_production: float = 0.0
    total_production: float = 0.0
    persistency: float = 0.0
    projected_305_day_production: float = 0.0
    # Extras for display; not part of the four-KPI contract
    peak_days_in_milk: int = 0
    days_in_milk: int = 0
    average_daily_production: float = 0.0
